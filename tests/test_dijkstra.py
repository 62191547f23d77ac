from math import inf

import networkx as nx
import pytest

from conftest import brute_force_cost, random_graph
from campus_routing.dijkstra import Dijkstra, shortest_path, shortest_path_tree
from campus_routing.models import Location


def test_prefers_faster_direct_edge(abc_graph):
    A, C = abc_graph.location(1), abc_graph.location(3)
    cost, path = shortest_path(abc_graph, A, C)
    assert cost == pytest.approx(6.0)
    assert [loc.label for loc in path] == ["A", "C"]


def test_distance_weight_takes_shorter_path(abc_graph):
    A, C = abc_graph.location(1), abc_graph.location(3)
    cost, path = shortest_path(abc_graph, A, C, weight="distance")
    assert cost == pytest.approx(3000.0)
    assert [loc.label for loc in path] == ["A", "B", "C"]


def test_speed_override_changes_costs(abc_graph):
    A, B = abc_graph.location(1), abc_graph.location(2)
    tree = shortest_path_tree(abc_graph, A, speed_override_kmph=60.0)
    assert tree.distance_to(B) == pytest.approx(1.0)


def test_unreachable_target_has_infinite_cost_and_empty_path(abc_graph):
    A, C = abc_graph.location(1), abc_graph.location(3)
    tree = shortest_path_tree(abc_graph, C)
    assert tree.distance_to(A) == inf
    assert tree.prev[A.id] is None
    assert tree.path_to(A) == []
    assert tree.path_to(Location(99, "ghost", 0, 0)) == []


def test_path_to_source_is_the_source(abc_graph):
    A = abc_graph.location(1)
    assert shortest_path_tree(abc_graph, A).path_to(A) == [A]


def test_engine_resets_between_sources(abc_graph):
    A, B, C = (abc_graph.location(i) for i in (1, 2, 3))
    engine = Dijkstra(abc_graph)
    assert engine.distance_to(C) == inf
    assert engine.shortest_path_to(C) == []

    engine.compute_shortest_paths(A)
    assert engine.distance_to(C) == pytest.approx(6.0)

    engine.compute_shortest_paths(B)
    assert engine.distance_to(A) == inf
    assert engine.distances[B.id] == 0.0
    assert engine.previous[C.id] == B.id


def test_skips_edges_to_unknown_locations(abc_graph):
    abc_graph.connect(1, 77, 10, 10)
    tree = shortest_path_tree(abc_graph, abc_graph.location(1))
    assert 77 not in tree.dist


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_matches_brute_force_enumeration(seed):
    G = random_graph(7, 0.35, seed)
    for s in G.locations():
        tree = shortest_path_tree(G, s)
        for t in G.locations():
            expected = brute_force_cost(G, s.id, t.id, "time_min")
            assert tree.distance_to(t) == pytest.approx(expected)


def test_matches_networkx_on_campus(campus_graph):
    gate = campus_graph.location_by_label("Main Gate")
    tree = shortest_path_tree(campus_graph, gate)
    lengths = nx.single_source_dijkstra_path_length(campus_graph.nx, gate.id, weight="time_min")
    for loc in campus_graph.locations():
        assert tree.distance_to(loc) == pytest.approx(lengths[loc.id])
