from math import inf

import numpy as np
import pytest

from conftest import random_graph
from campus_routing.dijkstra import shortest_path_tree
from campus_routing.errors import NotComputedError
from campus_routing.floyd_warshall import FloydWarshall
from campus_routing.models import Location


def test_queries_before_computation_fail_loudly(abc_graph):
    fw = FloydWarshall(abc_graph)
    A, C = abc_graph.location(1), abc_graph.location(3)
    with pytest.raises(NotComputedError):
        fw.shortest_path(A, C)
    with pytest.raises(NotComputedError):
        fw.shortest_distance(A, C)
    with pytest.raises(RuntimeError):
        fw.distances


def test_all_pairs_by_distance(abc_graph):
    fw = FloydWarshall(abc_graph)
    fw.compute_all_pairs_shortest_paths()
    A, B, C = (abc_graph.location(i) for i in (1, 2, 3))
    assert fw.shortest_distance(A, C) == pytest.approx(3000.0)
    assert [loc.label for loc in fw.shortest_path(A, C)] == ["A", "B", "C"]
    assert fw.shortest_distance(A, A) == 0.0
    assert fw.shortest_path(A, A) == [A]
    assert np.all(np.diag(fw.distances) == 0.0)
    assert [loc.id for loc in fw.nodes] == [1, 2, 3]


def test_missing_paths_and_unknown_locations(abc_graph):
    fw = FloydWarshall(abc_graph)
    fw.compute_all_pairs_shortest_paths()
    A, C = abc_graph.location(1), abc_graph.location(3)
    ghost = Location(99, "ghost", 0, 0)
    assert fw.shortest_distance(C, A) == inf
    assert fw.shortest_path(C, A) == []
    assert fw.shortest_distance(A, ghost) == inf
    assert fw.shortest_path(ghost, A) == []
    assert fw.next_hops[2, 0] == -1


def test_parallel_edges_keep_the_cheapest(abc_graph):
    abc_graph.connect(1, 3, 100, 5)
    fw = FloydWarshall(abc_graph)
    fw.compute_all_pairs_shortest_paths()
    A, C = abc_graph.location(1), abc_graph.location(3)
    assert fw.shortest_distance(A, C) == pytest.approx(100.0)
    assert fw.shortest_path(A, C) == [A, C]


@pytest.mark.parametrize("seed", [11, 12, 13])
def test_matches_dijkstra_by_distance(seed):
    G = random_graph(9, 0.3, seed)
    fw = FloydWarshall(G)
    fw.compute_all_pairs_shortest_paths()
    for s in G.locations():
        tree = shortest_path_tree(G, s, weight="distance")
        for t in G.locations():
            assert fw.shortest_distance(s, t) == pytest.approx(tree.distance_to(t))
            path = fw.shortest_path(s, t)
            if tree.distance_to(t) == inf:
                assert path == []
            else:
                assert path[0] == s and path[-1] == t


def test_recomputation_picks_up_new_edges(abc_graph):
    fw = FloydWarshall(abc_graph)
    fw.compute_all_pairs_shortest_paths()
    A, C = abc_graph.location(1), abc_graph.location(3)
    assert fw.shortest_distance(C, A) == inf
    abc_graph.connect(3, 1, 700, 10)
    fw.compute_all_pairs_shortest_paths()
    assert fw.shortest_distance(C, A) == pytest.approx(700.0)
