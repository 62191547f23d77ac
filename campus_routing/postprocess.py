"""
Deduplication and ranking of candidate routes.
"""

from campus_routing.graph import Graph
from campus_routing.metrics import (
    count_landmarks,
    route_distance_m,
    route_travel_time_min,
)
from campus_routing.models import Route


def route_key(route: Route) -> str:
    """
    Serialized id sequence identifying a route.
    """
    return ",".join(str(loc.id) for loc in route)


def dedupe_routes(routes: list[Route]) -> list[Route]:
    """
    Drop routes whose id sequence was already seen, keeping the first.
    """
    seen: set[str] = set()
    out: list[Route] = []
    for route in routes:
        key = route_key(route)
        if key in seen:
            continue
        seen.add(key)
        out.append(route)
    return out


def sort_by_distance(routes: list[Route], graph: Graph) -> list[Route]:
    return sorted(routes, key=lambda r: route_distance_m(r, graph))


def sort_by_travel_time(
    routes: list[Route],
    graph: Graph,
    speed_override_kmph: float = 0.0,
) -> list[Route]:
    return sorted(
        routes,
        key=lambda r: route_travel_time_min(r, graph, speed_override_kmph),
    )


def sort_by_landmarks(routes: list[Route], landmark_types: set[str]) -> list[Route]:
    """
    Routes visiting the most landmarks first.
    """
    return sorted(
        routes,
        key=lambda r: count_landmarks(r, landmark_types),
        reverse=True,
    )
