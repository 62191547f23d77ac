"""
All-pairs shortest paths by distance with the Floyd-Warshall algorithm.
"""

import logging
import numpy as np

from campus_routing.errors import NotComputedError
from campus_routing.graph import Graph
from campus_routing.models import Location, Route


logger = logging.getLogger(__name__)


class FloydWarshall:
    """
    All-pairs shortest distances (meters) and a next-hop matrix for path
    reconstruction. `compute_all_pairs_shortest_paths` must run before any
    query.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self._dist: np.ndarray | None = None
        self._next: np.ndarray | None = None
        self._index_by_id: dict[int, int] = {}
        self._nodes: list[Location] = []

    def compute_all_pairs_shortest_paths(self) -> None:
        nodes = self.graph.locations()
        n = len(nodes)
        index_by_id = {loc.id: i for i, loc in enumerate(nodes)}

        dist = np.full((n, n), np.inf, dtype=np.float64)
        nxt = np.full((n, n), -1, dtype=np.int64)
        np.fill_diagonal(dist, 0.0)

        for loc in nodes:
            i = index_by_id[loc.id]
            for edge in self.graph.edges_from(loc.id):
                j = index_by_id.get(edge.destination_id)
                if j is None or i == j:
                    continue
                if edge.distance_m < dist[i, j]:
                    dist[i, j] = edge.distance_m
                    nxt[i, j] = j

        for k in range(n):
            via_k = dist[:, k, None] + dist[None, k, :]
            better = via_k < dist
            if not better.any():
                continue
            dist = np.where(better, via_k, dist)
            nxt = np.where(better, nxt[:, k, None], nxt)

        self._dist = dist
        self._next = nxt
        self._index_by_id = index_by_id
        self._nodes = nodes
        logger.debug("floyd-warshall computed for %d locations", n)

    def shortest_distance(self, source: Location, destination: Location) -> float:
        """
        Shortest distance in meters, infinite if there is no path or either
        location is unknown.
        """
        dist = self._require(self._dist)
        i = self._index_by_id.get(source.id)
        j = self._index_by_id.get(destination.id)
        if i is None or j is None:
            return float("inf")
        return float(dist[i, j])

    def shortest_path(self, source: Location, destination: Location) -> Route:
        """
        Follow next hops from source to destination. Empty if there is no path
        or either location is unknown.
        """
        dist = self._require(self._dist)
        nxt = self._require(self._next)
        i = self._index_by_id.get(source.id)
        j = self._index_by_id.get(destination.id)
        if i is None or j is None or not np.isfinite(dist[i, j]):
            return []

        path: Route = [self._nodes[i]]
        current = i
        for _ in range(len(self._nodes)):
            if current == j:
                break
            current = int(nxt[current, j])
            if current == -1:
                break
            path.append(self._nodes[current])
        return path

    @property
    def distances(self) -> np.ndarray:
        return self._require(self._dist)

    @property
    def next_hops(self) -> np.ndarray:
        return self._require(self._next)

    @property
    def nodes(self) -> list[Location]:
        """
        Locations in matrix index order.
        """
        self._require(self._dist)
        return list(self._nodes)

    @staticmethod
    def _require(matrix: np.ndarray | None) -> np.ndarray:
        if matrix is None:
            raise NotComputedError(
                "compute_all_pairs_shortest_paths must be called first"
            )
        return matrix
