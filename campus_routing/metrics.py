"""
Functions to compute the metrics of a route.

An adjacent pair with no direct edge contributes nothing to a total. With
parallel edges the first one found is used, not the cheapest.
"""

from campus_routing.graph import Graph
from campus_routing.models import Route


def route_distance_m(route: Route, graph: Graph) -> float:
    """
    Sum of edge distances in meters along the route.
    """
    total = 0.0
    for a, b in zip(route[:-1], route[1:]):
        edge = graph.find_edge(a.id, b.id)
        if edge is not None:
            total += edge.distance_m
    return total


def route_travel_time_min(
    route: Route,
    graph: Graph,
    speed_override_kmph: float = 0.0,
) -> float:
    """
    Sum of edge travel times in minutes along the route.
    """
    total = 0.0
    for a, b in zip(route[:-1], route[1:]):
        edge = graph.find_edge(a.id, b.id)
        if edge is not None:
            total += edge.travel_time_min(speed_override_kmph)
    return total


def count_landmarks(route: Route, landmark_types: set[str]) -> int:
    """
    Number of route locations whose type is one of `landmark_types`.
    """
    return sum(1 for loc in route if loc.type in landmark_types)
