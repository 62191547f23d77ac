"""
Critical path method over the road network, with travel time as activity
duration.

Earliest and latest start times are found by relaxing edges until a full pass
makes no update. This is a longest-path computation: on a graph with a
positive cycle reachable from the source the passes never settle, so
`max_passes` can bound them.
"""

import logging
from dataclasses import dataclass, field
from math import inf

from campus_routing.graph import Graph
from campus_routing.models import Location


logger = logging.getLogger(__name__)

EPSILON = 0.001


@dataclass
class CriticalPathResult:
    """
    Per-location schedule of one computation. `latest_start`, `slack` and
    `critical_path` stay empty when the destination is unreachable.
    """
    earliest_start: dict[int, float] = field(default_factory=dict)
    latest_start: dict[int, float] = field(default_factory=dict)
    slack: dict[int, float] = field(default_factory=dict)
    critical_path: list[int] = field(default_factory=list)
    converged: bool = True


class CriticalPath:
    """
    Critical path engine. Each call to `compute_critical_path` replaces the
    previous result.
    """

    def __init__(
        self,
        graph: Graph,
        *,
        speed_override_kmph: float = 0.0,
        max_passes: int | None = None,
    ) -> None:
        self.graph = graph
        self.speed_override_kmph = speed_override_kmph
        self.max_passes = max_passes
        self._result = CriticalPathResult()

    def compute_critical_path(
        self,
        source: Location,
        destination: Location,
    ) -> CriticalPathResult:
        result = CriticalPathResult()
        self._result = result
        nodes = self.graph.locations()
        known = {loc.id for loc in nodes}

        # (source, destination, duration) for every edge between known nodes.
        arcs: list[tuple[int, int, float]] = []
        for loc in nodes:
            for edge in self.graph.edges_from(loc.id):
                if edge.destination_id in known:
                    arcs.append(
                        (loc.id, edge.destination_id,
                         edge.travel_time_min(self.speed_override_kmph))
                    )

        es = result.earliest_start
        for loc in nodes:
            es[loc.id] = -inf
        es[source.id] = 0.0

        def forward_pass() -> bool:
            updated = False
            for u, v, duration in arcs:
                if es.get(u, -inf) == -inf:
                    continue
                if es[u] + duration > es[v]:
                    es[v] = es[u] + duration
                    updated = True
            return updated

        if not self._relax(forward_pass, "forward"):
            result.converged = False

        if es.get(destination.id, -inf) == -inf:
            logger.debug("critical path: %s unreachable from %s", destination.id, source.id)
            return result

        ls = result.latest_start
        for loc in nodes:
            ls[loc.id] = inf
        ls[destination.id] = es[destination.id]

        def backward_pass() -> bool:
            updated = False
            for u, v, duration in arcs:
                if es[v] == -inf:
                    continue
                if ls[v] - duration < ls[u]:
                    ls[u] = ls[v] - duration
                    updated = True
            return updated

        if not self._relax(backward_pass, "backward"):
            result.converged = False

        for loc in nodes:
            if es[loc.id] == -inf:
                continue
            result.slack[loc.id] = ls[loc.id] - es[loc.id]
        result.critical_path = sorted(
            (nid for nid, s in result.slack.items() if abs(s) < EPSILON),
            key=lambda nid: (es[nid], nid),
        )
        return result

    def _relax(self, one_pass, name: str) -> bool:
        """
        Repeat a pass until it makes no update. Returns False if `max_passes`
        was hit first.
        """
        passes = 0
        while one_pass():
            passes += 1
            if self.max_passes is not None and passes >= self.max_passes:
                logger.warning(
                    "critical path %s pass did not settle after %d passes",
                    name,
                    passes,
                )
                return False
        logger.debug("critical path %s pass settled after %d passes", name, passes + 1)
        return True

    @property
    def result(self) -> CriticalPathResult:
        return self._result

    def critical_path(self) -> list[int]:
        return list(self._result.critical_path)

    def earliest_start(self, location_id: int) -> float:
        return self._result.earliest_start.get(location_id, -inf)

    def latest_start(self, location_id: int) -> float:
        return self._result.latest_start.get(location_id, inf)

    def slack(self, location_id: int) -> float:
        return self._result.slack.get(location_id, inf)

    def total_duration(self) -> float:
        """
        Earliest start of the last node on the critical path, 0 if there is
        no critical path.
        """
        if not self._result.critical_path:
            return 0.0
        return self._result.earliest_start.get(self._result.critical_path[-1], 0.0)
