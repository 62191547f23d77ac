"""
Transportation problem heuristics applied to route selection.

Sources each supply one unit and destinations each demand an equal share, so
total supply equals total demand. The cost of a source/destination cell is
the shortest path cost between them.
"""

import logging
from dataclasses import dataclass, field
import numpy as np

from campus_routing.dijkstra import shortest_path_tree
from campus_routing.errors import NotComputedError
from campus_routing.graph import Graph
from campus_routing.models import Location, Weight


logger = logging.getLogger(__name__)

EPSILON = 0.001


@dataclass
class TransportationProblem:
    """
    Cost matrix (rows are sources, columns are destinations) with supplies
    and demands.
    """
    sources: list[Location]
    destinations: list[Location]
    costs: np.ndarray
    supply: np.ndarray
    demand: np.ndarray


@dataclass
class Allocation:
    """
    Source id to allocated destination. A source that was split across
    destinations keeps the last one it was allocated to.
    """
    assignments: dict[int, Location] = field(default_factory=dict)
    total_cost: float = 0.0

    def __contains__(self, source: object) -> bool:
        if isinstance(source, Location):
            return source.id in self.assignments
        return source in self.assignments

    def __len__(self) -> int:
        return len(self.assignments)


def build_transportation_problem(
    graph: Graph,
    sources: list[Location],
    destinations: list[Location],
    *,
    weight: Weight = "time",
    speed_override_kmph: float = 0.0,
) -> TransportationProblem:
    """
    Build the cost matrix with one shortest path tree per source.
    """
    m, n = len(sources), len(destinations)
    costs = np.full((m, n), np.inf, dtype=np.float64)
    for i, src in enumerate(sources):
        tree = shortest_path_tree(
            graph,
            src,
            weight=weight,
            speed_override_kmph=speed_override_kmph,
        )
        for j, dst in enumerate(destinations):
            costs[i, j] = tree.distance_to(dst)
    supply = np.ones(m, dtype=np.float64)
    demand = np.full(n, m / n if n else 0.0, dtype=np.float64)
    return TransportationProblem(
        sources=list(sources),
        destinations=list(destinations),
        costs=costs,
        supply=supply,
        demand=demand,
    )


class _TransportationHeuristic:
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
        self._problem: TransportationProblem | None = None
        self._allocation = Allocation()

    def initialize(
        self,
        sources: list[Location],
        destinations: list[Location],
    ) -> TransportationProblem:
        self._problem = build_transportation_problem(
            self.graph,
            sources,
            destinations,
            weight=self.weight,
            speed_override_kmph=self.speed_override_kmph,
        )
        self._allocation = Allocation()
        return self._problem

    @property
    def problem(self) -> TransportationProblem:
        if self._problem is None:
            raise NotComputedError("initialize must be called first")
        return self._problem

    @property
    def cost_matrix(self) -> np.ndarray:
        return self.problem.costs

    def solve(self) -> Allocation:
        problem = self.problem
        assignments = self._allocate(problem)
        index_by_src = {s.id: i for i, s in enumerate(problem.sources)}
        index_by_dst = {d.id: j for j, d in enumerate(problem.destinations)}
        total = 0.0
        for src_id, dst in assignments.items():
            total += float(problem.costs[index_by_src[src_id], index_by_dst[dst.id]])
        self._allocation = Allocation(assignments=assignments, total_cost=total)
        logger.debug(
            "%s allocated %d of %d sources, total cost %.3f",
            type(self).__name__,
            len(assignments),
            len(problem.sources),
            total,
        )
        return self._allocation

    def total_cost(self) -> float:
        return self._allocation.total_cost

    def _allocate(self, problem: TransportationProblem) -> dict[int, Location]:
        raise NotImplementedError


class VogelApproximation(_TransportationHeuristic):
    """
    Vogel's approximation method: repeatedly pick the row or column with the
    largest penalty (gap between its two cheapest cells) and fill its
    cheapest cell.
    """

    def _allocate(self, problem: TransportationProblem) -> dict[int, Location]:
        costs = problem.costs
        supply = problem.supply.copy()
        demand = problem.demand.copy()
        rows = list(range(len(problem.sources)))
        cols = list(range(len(problem.destinations)))
        assignments: dict[int, Location] = {}

        while rows and cols:
            best_penalty = -1.0
            best_index = -1
            is_row = True
            for i in rows:
                p = _penalty(costs[i, cols])
                if p > best_penalty:
                    best_penalty, best_index, is_row = p, i, True
            for j in cols:
                p = _penalty(costs[rows, j])
                if p > best_penalty:
                    best_penalty, best_index, is_row = p, j, False

            if is_row:
                i = best_index
                j = _argmin_finite(costs[i, cols], cols)
                if j is None:
                    rows.remove(i)
                    continue
            else:
                j = best_index
                i = _argmin_finite(costs[rows, j], rows)
                if i is None:
                    cols.remove(j)
                    continue

            amount = min(supply[i], demand[j])
            assignments[problem.sources[i].id] = problem.destinations[j]
            supply[i] -= amount
            demand[j] -= amount
            if supply[i] <= EPSILON:
                rows.remove(i)
            if demand[j] <= EPSILON:
                cols.remove(j)

        return assignments


class NorthwestCorner(_TransportationHeuristic):
    """
    Northwest corner rule: fill cells in input order starting from the first
    source and destination, ignoring cost.
    """

    def _allocate(self, problem: TransportationProblem) -> dict[int, Location]:
        supply = problem.supply.copy()
        demand = problem.demand.copy()
        m, n = len(problem.sources), len(problem.destinations)
        assignments: dict[int, Location] = {}

        i = j = 0
        while i < m and j < n:
            amount = min(supply[i], demand[j])
            assignments[problem.sources[i].id] = problem.destinations[j]
            supply[i] -= amount
            demand[j] -= amount
            if supply[i] <= EPSILON:
                i += 1
            if demand[j] <= EPSILON:
                j += 1

        return assignments


def _penalty(line: np.ndarray) -> float:
    """
    Gap between the two lowest costs, or the lowest cost when there is only
    one finite candidate.
    """
    lowest = second = np.inf
    for c in line:
        if c < lowest:
            second, lowest = lowest, c
        elif c < second:
            second = c
    if np.isinf(second):
        return float(lowest)
    return float(second - lowest)


def _argmin_finite(line: np.ndarray, indices: list[int]) -> int | None:
    best = None
    best_cost = np.inf
    for idx, c in zip(indices, line):
        if c < best_cost:
            best_cost, best = c, idx
    return best
