"""
Single-source shortest paths with Dijkstra's algorithm.

`shortest_path_tree` is the shortest path capability shared by every engine
that needs one (transportation costs, landmark segments).
"""

import heapq
import logging
from dataclasses import dataclass, field
from itertools import count
from math import inf, isinf

from campus_routing.graph import Graph
from campus_routing.models import Location, Route, Weight


logger = logging.getLogger(__name__)


@dataclass
class ShortestPathTree:
    """
    Best known cost and predecessor of every location from one source. Built
    fresh for each computation.
    """
    source: Location
    dist: dict[int, float] = field(default_factory=dict)
    prev: dict[int, int | None] = field(default_factory=dict)
    locations: dict[int, Location] = field(default_factory=dict)

    def distance_to(self, target: Location) -> float:
        return self.dist.get(target.id, inf)

    def path_to(self, target: Location) -> Route:
        """
        Walk predecessors from the target back to the source. Empty if the
        target was never reached.
        """
        if target.id not in self.dist or isinf(self.dist[target.id]):
            return []
        path: Route = []
        cur: int | None = target.id
        while cur is not None:
            path.append(self.locations[cur])
            cur = self.prev.get(cur)
        path.reverse()
        return path


def shortest_path_tree(
    graph: Graph,
    source: Location,
    *,
    weight: Weight = "time",
    speed_override_kmph: float = 0.0,
) -> ShortestPathTree:
    """
    Compute the minimum cumulative cost from `source` to every reachable
    location. The cost is travel time in minutes by default, or distance in
    meters with `weight="distance"`. Unreachable locations keep an infinite
    cost and no predecessor.
    """
    tree = ShortestPathTree(source=source)
    for loc in graph.locations():
        tree.locations[loc.id] = loc
        tree.dist[loc.id] = inf
        tree.prev[loc.id] = None
    tree.locations.setdefault(source.id, source)
    tree.dist[source.id] = 0.0
    tree.prev[source.id] = None

    tie = count()
    pq: list[tuple[float, int, int]] = [(0.0, next(tie), source.id)]
    visited: set[int] = set()

    while pq:
        d_u, _, u = heapq.heappop(pq)
        if u in visited:
            continue
        visited.add(u)

        for edge in graph.edges_from(u):
            v = edge.destination_id
            if v not in tree.locations:
                continue
            alt = d_u + edge.weight(weight, speed_override_kmph)
            if alt < tree.dist[v]:
                tree.dist[v] = alt
                tree.prev[v] = u
                heapq.heappush(pq, (alt, next(tie), v))

    logger.debug(
        "dijkstra from %s (%s): settled %d of %d locations",
        source.id,
        weight,
        len(visited),
        len(tree.locations),
    )
    return tree


def shortest_path(
    graph: Graph,
    source: Location,
    target: Location,
    *,
    weight: Weight = "time",
    speed_override_kmph: float = 0.0,
) -> tuple[float, Route]:
    """
    Get the shortest path cost and route between two locations.
    """
    tree = shortest_path_tree(
        graph,
        source,
        weight=weight,
        speed_override_kmph=speed_override_kmph,
    )
    return tree.distance_to(target), tree.path_to(target)


class Dijkstra:
    """
    Reusable Dijkstra engine over one graph. Each call to
    `compute_shortest_paths` replaces the previous results.
    """

    def __init__(
        self,
        graph: Graph,
        *,
        weight: Weight = "time",
        speed_override_kmph: float = 0.0,
    ) -> None:
        self.graph = graph
        self.weight = weight
        self.speed_override_kmph = speed_override_kmph
        self._tree: ShortestPathTree | None = None

    def compute_shortest_paths(self, source: Location) -> ShortestPathTree:
        self._tree = shortest_path_tree(
            self.graph,
            source,
            weight=self.weight,
            speed_override_kmph=self.speed_override_kmph,
        )
        return self._tree

    def distance_to(self, target: Location) -> float:
        if self._tree is None:
            return inf
        return self._tree.distance_to(target)

    def shortest_path_to(self, target: Location) -> Route:
        if self._tree is None:
            return []
        return self._tree.path_to(target)

    @property
    def distances(self) -> dict[int, float]:
        return dict(self._tree.dist) if self._tree else {}

    @property
    def previous(self) -> dict[int, int | None]:
        return dict(self._tree.prev) if self._tree else {}
