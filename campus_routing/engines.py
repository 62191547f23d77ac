"""
Route engines behind a common interface, selected by `Algorithm`.
"""

from enum import Enum
from typing import Protocol

from campus_routing.astar import AStarSearch
from campus_routing.critical_path import CriticalPath
from campus_routing.dijkstra import Dijkstra
from campus_routing.floyd_warshall import FloydWarshall
from campus_routing.graph import Graph
from campus_routing.models import Location, Route
from campus_routing.transportation import NorthwestCorner, VogelApproximation


class Algorithm(str, Enum):
    DIJKSTRA = "dijkstra"
    A_STAR = "astar"
    FLOYD_WARSHALL = "floyd_warshall"
    VOGEL = "vogel"
    NORTHWEST_CORNER = "northwest_corner"
    CRITICAL_PATH = "critical_path"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, name: "str | Algorithm") -> "Algorithm":
        """
        Accept an enum value ("astar") or a display label
        ("A* Search Algorithm"), ignoring case.
        """
        if isinstance(name, Algorithm):
            return name
        key = name.strip().casefold()
        for algo in cls:
            if key in (algo.value, algo.label.casefold()):
                return algo
        raise ValueError(f"Unknown algorithm: {name}")


_LABELS = {
    Algorithm.DIJKSTRA: "Dijkstra's Algorithm",
    Algorithm.A_STAR: "A* Search Algorithm",
    Algorithm.FLOYD_WARSHALL: "Floyd-Warshall Algorithm",
    Algorithm.VOGEL: "Vogel Approximation Method",
    Algorithm.NORTHWEST_CORNER: "Northwest Corner Method",
    Algorithm.CRITICAL_PATH: "Critical Path Method",
}


class RouteEngine(Protocol):
    algorithm: Algorithm

    def routes(self, start: Location, end: Location) -> list[Route]:
        ...


class DijkstraEngine:
    algorithm = Algorithm.DIJKSTRA

    def __init__(self, graph: Graph, *, speed_override_kmph: float = 0.0) -> None:
        self._dijkstra = Dijkstra(graph, speed_override_kmph=speed_override_kmph)

    def routes(self, start: Location, end: Location) -> list[Route]:
        self._dijkstra.compute_shortest_paths(start)
        path = self._dijkstra.shortest_path_to(end)
        return [path] if path else []


class AStarEngine:
    algorithm = Algorithm.A_STAR

    # Distance based, so a speed override does not apply.
    def __init__(self, graph: Graph, *, speed_override_kmph: float = 0.0) -> None:
        self._search = AStarSearch(graph)

    def routes(self, start: Location, end: Location) -> list[Route]:
        path = self._search.find_optimal_path(start, end)
        return [path] if path else []


class FloydWarshallEngine:
    algorithm = Algorithm.FLOYD_WARSHALL

    # Distance based, so a speed override does not apply.
    def __init__(self, graph: Graph, *, speed_override_kmph: float = 0.0) -> None:
        self._fw = FloydWarshall(graph)

    def routes(self, start: Location, end: Location) -> list[Route]:
        self._fw.compute_all_pairs_shortest_paths()
        path = self._fw.shortest_path(start, end)
        return [path] if path else []


class _AllocationEngine:
    def __init__(self, graph: Graph, *, speed_override_kmph: float = 0.0) -> None:
        self._heuristic = self._make(graph, speed_override_kmph)

    def _make(self, graph: Graph, speed_override_kmph: float):
        raise NotImplementedError

    def routes(self, start: Location, end: Location) -> list[Route]:
        self._heuristic.initialize([start], [end])
        allocation = self._heuristic.solve()
        if start in allocation:
            return [[start, end]]
        return []


class VogelEngine(_AllocationEngine):
    algorithm = Algorithm.VOGEL

    def _make(self, graph: Graph, speed_override_kmph: float) -> VogelApproximation:
        return VogelApproximation(graph, speed_override_kmph=speed_override_kmph)


class NorthwestCornerEngine(_AllocationEngine):
    algorithm = Algorithm.NORTHWEST_CORNER

    def _make(self, graph: Graph, speed_override_kmph: float) -> NorthwestCorner:
        return NorthwestCorner(graph, speed_override_kmph=speed_override_kmph)


class CriticalPathEngine:
    algorithm = Algorithm.CRITICAL_PATH

    def __init__(
        self,
        graph: Graph,
        *,
        speed_override_kmph: float = 0.0,
        max_passes: int | None = None,
    ) -> None:
        self.graph = graph
        self._cpm = CriticalPath(
            graph,
            speed_override_kmph=speed_override_kmph,
            max_passes=max_passes,
        )

    def routes(self, start: Location, end: Location) -> list[Route]:
        result = self._cpm.compute_critical_path(start, end)
        path = [
            loc for loc in (self.graph.location(i) for i in result.critical_path)
            if loc is not None
        ]
        return [path] if path else []


ENGINES: dict[Algorithm, type] = {
    Algorithm.DIJKSTRA: DijkstraEngine,
    Algorithm.A_STAR: AStarEngine,
    Algorithm.FLOYD_WARSHALL: FloydWarshallEngine,
    Algorithm.VOGEL: VogelEngine,
    Algorithm.NORTHWEST_CORNER: NorthwestCornerEngine,
    Algorithm.CRITICAL_PATH: CriticalPathEngine,
}


def make_engine(
    algorithm: Algorithm | str,
    graph: Graph,
    *,
    speed_override_kmph: float = 0.0,
    critical_path_max_passes: int | None = None,
) -> RouteEngine:
    """
    Build the engine for an algorithm.
    """
    algo = Algorithm.parse(algorithm)
    if algo is Algorithm.CRITICAL_PATH:
        return CriticalPathEngine(
            graph,
            speed_override_kmph=speed_override_kmph,
            max_passes=critical_path_max_passes,
        )
    return ENGINES[algo](graph, speed_override_kmph=speed_override_kmph)
