"""
A* search for the shortest path by distance between two locations.
"""

import heapq
import logging
from dataclasses import dataclass, field
from itertools import count
from math import inf, sqrt

from campus_routing.graph import Graph
from campus_routing.models import Location, Route


logger = logging.getLogger(__name__)

METERS_PER_DEGREE = 111000.0


def straight_line_m(a: Location, b: Location) -> float:
    """
    Straight-line distance in meters between two locations, treating latitude
    and longitude degrees as a plane.
    """
    d_lat = a.latitude - b.latitude
    d_lon = a.longitude - b.longitude
    return sqrt(d_lat * d_lat + d_lon * d_lon) * METERS_PER_DEGREE


@dataclass
class AStarState:
    """
    Scores of one search.
    """
    g_score: dict[int, float] = field(default_factory=dict)
    f_score: dict[int, float] = field(default_factory=dict)
    came_from: dict[int, int] = field(default_factory=dict)


class AStarSearch:
    """
    A* over edge distances, guided by the straight-line distance to the
    destination.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self._state = AStarState()

    def find_optimal_path(self, source: Location, destination: Location) -> Route:
        """
        Find the path from `source` to `destination` minimizing total edge
        distance, or an empty route if the destination is never reached.
        """
        state = AStarState()
        self._state = state
        by_id = {loc.id: loc for loc in self.graph.locations()}
        by_id.setdefault(source.id, source)

        state.g_score[source.id] = 0.0
        state.f_score[source.id] = straight_line_m(source, destination)

        tie = count()
        open_heap: list[tuple[float, int, int]] = [
            (state.f_score[source.id], next(tie), source.id)
        ]
        closed: set[int] = set()

        while open_heap:
            _, _, current = heapq.heappop(open_heap)
            if current in closed:
                continue
            if current == destination.id:
                logger.debug("a* reached %s after closing %d nodes", current, len(closed))
                return self._reconstruct(by_id, current)
            closed.add(current)

            for edge in self.graph.edges_from(current):
                neighbor = by_id.get(edge.destination_id)
                if neighbor is None or neighbor.id in closed:
                    continue
                tentative = state.g_score[current] + edge.distance_m
                if tentative >= state.g_score.get(neighbor.id, inf):
                    continue
                state.came_from[neighbor.id] = current
                state.g_score[neighbor.id] = tentative
                state.f_score[neighbor.id] = tentative + straight_line_m(neighbor, destination)
                heapq.heappush(open_heap, (state.f_score[neighbor.id], next(tie), neighbor.id))

        logger.debug("a* found no path from %s to %s", source.id, destination.id)
        return []

    def g_score(self, location: Location) -> float:
        return self._state.g_score.get(location.id, inf)

    def f_score(self, location: Location) -> float:
        return self._state.f_score.get(location.id, inf)

    def _reconstruct(self, by_id: dict[int, Location], current: int) -> Route:
        path: Route = [by_id[current]]
        while current in self._state.came_from:
            current = self._state.came_from[current]
            path.append(by_id[current])
        path.reverse()
        return path
