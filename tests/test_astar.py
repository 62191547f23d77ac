from math import inf

import pytest

from campus_routing.astar import AStarSearch, straight_line_m
from campus_routing.dijkstra import shortest_path_tree
from campus_routing.graph import Graph
from campus_routing.metrics import route_distance_m
from campus_routing.models import Location


def test_heuristic_scales_degrees_to_meters():
    a = Location(1, "a", 0.0, 0.0)
    b = Location(2, "b", 0.003, 0.004)
    assert straight_line_m(a, b) == pytest.approx(555.0)


def test_minimizes_distance_not_time(abc_graph):
    A, C = abc_graph.location(1), abc_graph.location(3)
    search = AStarSearch(abc_graph)
    path = search.find_optimal_path(A, C)
    assert [loc.label for loc in path] == ["A", "B", "C"]
    assert search.g_score(C) == pytest.approx(3000.0)
    assert search.f_score(C) == pytest.approx(3000.0)


def test_no_path_returns_empty_route(abc_graph):
    A, C = abc_graph.location(1), abc_graph.location(3)
    search = AStarSearch(abc_graph)
    assert search.find_optimal_path(C, A) == []
    assert search.g_score(A) == inf


def test_source_equals_destination(abc_graph):
    A = abc_graph.location(1)
    assert AStarSearch(abc_graph).find_optimal_path(A, A) == [A]


def test_state_is_rebuilt_per_search(abc_graph):
    A, B, C = (abc_graph.location(i) for i in (1, 2, 3))
    search = AStarSearch(abc_graph)
    search.find_optimal_path(A, C)
    search.find_optimal_path(B, C)
    assert search.g_score(A) == inf
    assert search.g_score(C) == pytest.approx(2000.0)


def test_agrees_with_dijkstra_by_distance_on_campus(campus_graph):
    search = AStarSearch(campus_graph)
    for s in campus_graph.locations():
        tree = shortest_path_tree(campus_graph, s, weight="distance")
        for t in campus_graph.locations():
            path = search.find_optimal_path(s, t)
            assert path[0] == s and path[-1] == t
            assert route_distance_m(path, campus_graph) == pytest.approx(tree.distance_to(t))


def test_tolerates_edges_to_unknown_locations():
    G = Graph()
    G.add_location(Location(1, "a", 0.0, 0.0))
    G.add_location(Location(2, "b", 0.0, 0.001))
    G.connect(1, 9, 10, 10)
    G.connect(1, 2, 200, 10)
    path = AStarSearch(G).find_optimal_path(G.location(1), G.location(2))
    assert [loc.id for loc in path] == [1, 2]
