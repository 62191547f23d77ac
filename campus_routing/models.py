"""
Data models for the road network entities.
"""

from dataclasses import dataclass, field
from typing import Literal


# Edge weight used by a path search: travel time in minutes or distance in
# meters.
Weight = Literal["time", "distance"]


@dataclass(frozen=True)
class Location:
    """
    A point of interest on the campus. Identity is the `id`; the `label` is
    the name shown to users and the `type` is a category tag (possibly empty)
    used to pick landmarks.
    """
    id: int
    label: str = field(compare=False)
    latitude: float = field(compare=False)
    longitude: float = field(compare=False)
    type: str = field(default="", compare=False)


@dataclass(frozen=True)
class Edge:
    """
    A directed road segment. A two-way road is two edges.
    """
    source_id: int
    destination_id: int
    distance_m: float
    default_speed_kmph: float

    def travel_time_min(self, speed_override_kmph: float = 0.0) -> float:
        """
        Travel time in minutes, at the override speed when it is positive and
        at the edge's default speed otherwise.
        """
        speed = (
            speed_override_kmph if speed_override_kmph > 0
            else self.default_speed_kmph
        )
        return (self.distance_m / 1000.0) / speed * 60.0

    def weight(self, weight: Weight, speed_override_kmph: float = 0.0) -> float:
        """
        Cost of the edge under the given weight.
        """
        if weight == "distance":
            return self.distance_m
        return self.travel_time_min(speed_override_kmph)


# An ordered walk from a start to an end location. Empty means "no path".
Route = list[Location]
