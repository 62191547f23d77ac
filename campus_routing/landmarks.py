"""
Routes that visit required waypoints (landmarks) on the way to a destination.
"""

import logging
from itertools import permutations

from campus_routing.dijkstra import ShortestPathTree, shortest_path_tree
from campus_routing.graph import Graph
from campus_routing.models import Location, Route


logger = logging.getLogger(__name__)

# Above this many waypoints only the given visit order is tried.
MAX_PERMUTED_WAYPOINTS = 4


class LandmarkRouter:
    """
    Chains shortest travel time segments through every waypoint, trying each
    visit order when there are few waypoints.
    """

    def __init__(self, graph: Graph, *, speed_override_kmph: float = 0.0) -> None:
        self.graph = graph
        self.speed_override_kmph = speed_override_kmph

    def find_routes_via_landmarks(
        self,
        source: Location,
        destination: Location,
        landmarks: list[Location],
        max_routes: int,
    ) -> list[Route]:
        """
        Get up to `max_routes` routes from source to destination that visit
        every landmark, cheapest first. When no route visits all of them,
        fall back to routes through each landmark on its own.
        """
        trees: dict[int, ShortestPathTree] = {}

        if not landmarks:
            path = self._tree(trees, source).path_to(destination)
            return [path] if path else []

        routes: list[Route] = []
        for order in self._visit_orders(landmarks):
            route = self._chain(trees, source, destination, order)
            if route:
                routes.append(route)

        if not routes and len(landmarks) > 1:
            logger.debug(
                "no route visits all %d landmarks, trying them one at a time",
                len(landmarks),
            )
            for landmark in landmarks:
                routes.extend(
                    self.find_routes_via_landmarks(source, destination, [landmark], 1)
                )
                if len(routes) >= max_routes:
                    break

        routes.sort(key=lambda r: self._route_cost(trees, r))
        return routes[:max(max_routes, 0)]

    def find_routes_via_landmark_type(
        self,
        source: Location,
        destination: Location,
        landmark_type: str,
        max_routes: int,
    ) -> list[Route]:
        """
        Use every location of `landmark_type` (case-insensitive) as a waypoint.
        No matching location gives no routes.
        """
        landmarks = self.graph.locations_of_type(landmark_type)
        if not landmarks:
            logger.debug("no locations of type %r", landmark_type)
            return []
        return self.find_routes_via_landmarks(source, destination, landmarks, max_routes)

    def _visit_orders(self, landmarks: list[Location]) -> list[tuple[Location, ...]]:
        if len(landmarks) > MAX_PERMUTED_WAYPOINTS:
            return [tuple(landmarks)]
        return list(permutations(landmarks))

    def _chain(
        self,
        trees: dict[int, ShortestPathTree],
        source: Location,
        destination: Location,
        order: tuple[Location, ...],
    ) -> Route:
        route: Route = [source]
        current = source
        for stop in (*order, destination):
            segment = self._tree(trees, current).path_to(stop)
            if not segment:
                return []
            route.extend(segment[1:])
            current = stop
        return route

    def _route_cost(self, trees: dict[int, ShortestPathTree], route: Route) -> float:
        """
        Sum of shortest path costs between consecutive route locations.
        """
        total = 0.0
        for a, b in zip(route[:-1], route[1:]):
            total += self._tree(trees, a).distance_to(b)
        return total

    def _tree(self, trees: dict[int, ShortestPathTree], source: Location) -> ShortestPathTree:
        tree = trees.get(source.id)
        if tree is None:
            tree = shortest_path_tree(
                self.graph,
                source,
                speed_override_kmph=self.speed_override_kmph,
            )
            trees[source.id] = tree
        return tree
