"""
Road network graph store and loading utilities.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator
import networkx as nx

from campus_routing.io import read_csv_rows
from campus_routing.models import Edge, Location


logger = logging.getLogger(__name__)


class Graph:
    """
    Directed, weighted road network. Locations are keyed by id and the
    outgoing edges of each location are kept in a networkx MultiDiGraph, so
    parallel edges between the same pair survive. The graph is written once at
    load time and only read afterwards.
    """

    def __init__(self) -> None:
        self._locations: dict[int, Location] = {}
        self._g = nx.MultiDiGraph()

    @property
    def nx(self) -> nx.MultiDiGraph:
        """
        The underlying networkx graph. Edges carry `edge`, `distance_m` and
        `time_min` attributes.
        """
        return self._g

    def add_location(self, location: Location) -> None:
        self._locations[location.id] = location
        self._g.add_node(location.id, location=location)

    def add_edge(self, edge: Edge) -> None:
        if edge.source_id not in self._locations or edge.destination_id not in self._locations:
            logger.debug(
                "edge %s -> %s references an unknown location",
                edge.source_id,
                edge.destination_id,
            )
        self._g.add_edge(
            edge.source_id,
            edge.destination_id,
            edge=edge,
            distance_m=edge.distance_m,
            time_min=edge.travel_time_min(),
        )

    def connect(
        self,
        source_id: int,
        destination_id: int,
        distance_m: float,
        speed_kmph: float,
    ) -> Edge:
        """
        Add an edge given by its fields and return it.
        """
        edge = Edge(source_id, destination_id, float(distance_m), float(speed_kmph))
        self.add_edge(edge)
        return edge

    def locations(self) -> list[Location]:
        return list(self._locations.values())

    def location(self, location_id: int) -> Location | None:
        return self._locations.get(location_id)

    def location_by_label(self, label: str) -> Location | None:
        """
        Get the first location with the given label.
        """
        for loc in self._locations.values():
            if loc.label == label:
                return loc
        return None

    def locations_of_type(self, location_type: str) -> list[Location]:
        """
        Get all locations whose type matches, ignoring case.
        """
        wanted = location_type.casefold()
        return [
            loc for loc in self._locations.values()
            if loc.type.casefold() == wanted
        ]

    def landmark_types(self) -> list[str]:
        """
        Get the distinct non-empty location types, sorted.
        """
        return sorted({loc.type for loc in self._locations.values() if loc.type})

    def edges_from(self, location_id: int) -> list[Edge]:
        if location_id not in self._g:
            return []
        return [
            data["edge"]
            for _, _, data in self._g.out_edges(location_id, data=True)
        ]

    def edges(self) -> Iterator[Edge]:
        for _, _, edge in self._g.edges(data="edge"):
            yield edge

    def find_edge(self, source_id: int, destination_id: int) -> Edge | None:
        """
        Get the first edge from `source_id` to `destination_id`, if any.
        """
        for edge in self.edges_from(source_id):
            if edge.destination_id == destination_id:
                return edge
        return None

    def __len__(self) -> int:
        return len(self._locations)

    def __contains__(self, location_id: object) -> bool:
        return location_id in self._locations


def build_campus_graph(
    locations: Iterable[Location],
    edges: Iterable[Edge],
) -> Graph:
    """
    Build a graph from already parsed locations and edges.
    """
    G = Graph()
    for loc in locations:
        G.add_location(loc)
    n_unknown = 0
    for edge in edges:
        if edge.source_id not in G or edge.destination_id not in G:
            n_unknown += 1
        G.add_edge(edge)
    if n_unknown:
        logger.warning("%d edge(s) reference unknown locations", n_unknown)
    return G


def load_locations(nodes_csv: str | Path) -> list[Location]:
    """
    Load locations from a CSV table with columns
    id,label,latitude,longitude,type (type may be empty or missing).
    """
    out: list[Location] = []
    for line_no, cells in read_csv_rows(nodes_csv):
        if len(cells) < 4:
            raise ValueError(f"{Path(nodes_csv).name}:{line_no}: expected at least 4 columns")
        try:
            out.append(
                Location(
                    id=int(cells[0]),
                    label=cells[1],
                    latitude=float(cells[2]),
                    longitude=float(cells[3]),
                    type=cells[4] if len(cells) > 4 else "",
                )
            )
        except ValueError as exc:
            raise ValueError(f"{Path(nodes_csv).name}:{line_no}: {exc}") from exc
    return out


def load_edges(edges_csv: str | Path) -> list[Edge]:
    """
    Load edges from a CSV table with columns
    source_id,destination_id,distance_meters,default_speed_kmph.
    """
    out: list[Edge] = []
    for line_no, cells in read_csv_rows(edges_csv):
        if len(cells) < 4:
            raise ValueError(f"{Path(edges_csv).name}:{line_no}: expected 4 columns")
        try:
            edge = Edge(
                source_id=int(cells[0]),
                destination_id=int(cells[1]),
                distance_m=float(cells[2]),
                default_speed_kmph=float(cells[3]),
            )
        except ValueError as exc:
            raise ValueError(f"{Path(edges_csv).name}:{line_no}: {exc}") from exc
        if edge.distance_m < 0 or edge.default_speed_kmph <= 0:
            raise ValueError(
                f"{Path(edges_csv).name}:{line_no}: distance must be >= 0 and speed > 0"
            )
        out.append(edge)
    return out


def load_campus_graph(nodes_csv: str | Path, edges_csv: str | Path) -> Graph:
    """
    Load the node and edge tables and build the graph.
    """
    return build_campus_graph(load_locations(nodes_csv), load_edges(edges_csv))
