"""
Shared graph fixtures.
"""

import random

import networkx as nx
import pytest

from campus_routing.config import data_paths, load_campus
from campus_routing.graph import Graph, build_campus_graph, load_campus_graph
from campus_routing.models import Edge, Location


def _loc(id: int, label: str, lat: float = 0.0, lon: float = 0.0, type: str = "") -> Location:
    return Location(id=id, label=label, latitude=lat, longitude=lon, type=type)


@pytest.fixture
def abc_graph() -> Graph:
    """
    A -> B (1000 m, 10 km/h), B -> C (2000 m, 20 km/h), A -> C (5000 m,
    50 km/h). Every edge takes 6 minutes.
    """
    locations = [
        _loc(1, "A", 0.000, 0.0),
        _loc(2, "B", 0.001, 0.0),
        _loc(3, "C", 0.002, 0.0),
    ]
    edges = [
        Edge(1, 2, 1000.0, 10.0),
        Edge(2, 3, 2000.0, 20.0),
        Edge(1, 3, 5000.0, 50.0),
    ]
    return build_campus_graph(locations, edges)


@pytest.fixture
def chain_graph() -> Graph:
    """
    A -> B -> C, 600 m at 6 km/h per edge (6 minutes each).
    """
    G = Graph()
    for i, name in enumerate("ABC", start=1):
        G.add_location(_loc(i, name))
    G.connect(1, 2, 600, 6)
    G.connect(2, 3, 600, 6)
    return G


@pytest.fixture
def landmark_graph() -> Graph:
    """
    Two-way roads at 60 km/h (1 minute per km):
    S-L1 1 km, L1-L2 1 km, L2-T 1 km, S-L2 3 km, L1-T 3 km.
    L1 and L2 are cafes; X is an isolated library.
    """
    G = Graph()
    G.add_location(_loc(1, "S"))
    G.add_location(_loc(2, "L1", type="cafe"))
    G.add_location(_loc(3, "L2", type="cafe"))
    G.add_location(_loc(4, "T"))
    G.add_location(_loc(5, "X", type="library"))
    for a, b, d in [(1, 2, 1000), (2, 3, 1000), (3, 4, 1000), (1, 3, 3000), (2, 4, 3000)]:
        G.connect(a, b, d, 60)
        G.connect(b, a, d, 60)
    return G


@pytest.fixture
def campus_graph() -> Graph:
    nodes_csv, edges_csv = data_paths(load_campus("campus"))
    return load_campus_graph(nodes_csv, edges_csv)


def random_graph(n: int, p: float, seed: int) -> Graph:
    """
    Random directed graph without parallel edges, with distances in
    100..2000 m and speeds in 5..50 km/h.
    """
    rng = random.Random(seed)
    G = Graph()
    for i in range(n):
        G.add_location(_loc(i, f"N{i}"))
    for u, v in nx.gnp_random_graph(n, p, seed=seed, directed=True).edges():
        G.connect(u, v, rng.randint(100, 2000), rng.choice([5, 10, 20, 30, 50]))
    return G


def brute_force_cost(G: Graph, s: int, t: int, attr: str) -> float:
    """
    Minimum path cost over every simple path from s to t.
    """
    if s == t:
        return 0.0
    best = float("inf")
    for path in nx.all_simple_paths(G.nx, s, t):
        cost = sum(
            min(d[attr] for d in G.nx[u][v].values())
            for u, v in zip(path[:-1], path[1:])
        )
        best = min(best, cost)
    return best
