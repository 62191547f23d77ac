"""
Route requests: run the selected engine, add landmark routes, then
deduplicate, rank and summarize the candidates.
"""

import logging
from dataclasses import dataclass, field
from typing import Literal

from campus_routing.config import RoutingSettings
from campus_routing.engines import Algorithm, make_engine
from campus_routing.graph import Graph
from campus_routing.landmarks import LandmarkRouter
from campus_routing.metrics import (
    count_landmarks,
    route_distance_m,
    route_travel_time_min,
)
from campus_routing.models import Location, Route
from campus_routing.postprocess import (
    dedupe_routes,
    sort_by_distance,
    sort_by_landmarks,
    sort_by_travel_time,
)


logger = logging.getLogger(__name__)

SortKey = Literal["distance", "time", "landmarks"]


@dataclass
class RouteRequest:
    start: Location
    end: Location
    algorithm: Algorithm = Algorithm.DIJKSTRA
    landmark_type: str | None = None
    sort_by: SortKey = "distance"


@dataclass
class RouteSummary:
    route: Route
    distance_m: float
    travel_time_min: float
    landmark_count: int = 0


@dataclass
class RouteResult:
    request: RouteRequest
    routes: list[RouteSummary] = field(default_factory=list)
    n_candidates: int = 0
    n_unique: int = 0


def plan_routes(
    graph: Graph,
    request: RouteRequest,
    settings: RoutingSettings | None = None,
) -> RouteResult:
    """
    Compute, deduplicate and rank routes for a request. At most
    `settings.max_display_routes` routes are kept.
    """
    settings = settings or RoutingSettings()
    speed = settings.speed_override_kmph

    engine = make_engine(
        request.algorithm,
        graph,
        speed_override_kmph=speed,
        critical_path_max_passes=settings.critical_path_max_passes,
    )
    candidates: list[Route] = list(engine.routes(request.start, request.end))

    landmark_types: set[str] = set()
    if request.landmark_type:
        router = LandmarkRouter(graph, speed_override_kmph=speed)
        candidates.extend(
            router.find_routes_via_landmark_type(
                request.start,
                request.end,
                request.landmark_type,
                settings.max_landmark_routes,
            )
        )
        landmark_types = {
            loc.type for loc in graph.locations_of_type(request.landmark_type)
        }

    routes = dedupe_routes(candidates)
    routes = rank_routes(routes, graph, request.sort_by, landmark_types, speed)
    logger.debug(
        "%s %s -> %s: %d candidate(s), %d unique",
        request.algorithm.value,
        request.start.id,
        request.end.id,
        len(candidates),
        len(routes),
    )

    result = RouteResult(
        request=request,
        n_candidates=len(candidates),
        n_unique=len(routes),
    )
    for route in routes[:settings.max_display_routes]:
        result.routes.append(
            RouteSummary(
                route=route,
                distance_m=route_distance_m(route, graph),
                travel_time_min=route_travel_time_min(route, graph, speed),
                landmark_count=count_landmarks(route, landmark_types),
            )
        )
    return result


def rank_routes(
    routes: list[Route],
    graph: Graph,
    sort_by: SortKey,
    landmark_types: set[str] | None = None,
    speed_override_kmph: float = 0.0,
) -> list[Route]:
    """
    Sort routes by the chosen key.
    """
    if sort_by == "distance":
        return sort_by_distance(routes, graph)
    if sort_by == "time":
        return sort_by_travel_time(routes, graph, speed_override_kmph)
    if sort_by == "landmarks":
        return sort_by_landmarks(routes, landmark_types or set())
    raise ValueError(f"Unknown sort key: {sort_by}")
