"""
Find and rank routes between two campus locations.
"""

import argparse
import logging
import sys

from campus_routing.config import (
    ALGORITHMS,
    SORT_KEYS,
    build_routing_settings,
    data_paths,
    load_campus,
)
from campus_routing.engines import Algorithm
from campus_routing.graph import Graph, load_campus_graph
from campus_routing.report import format_report
from campus_routing.service import RouteRequest, plan_routes


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find routes between two campus locations.")
    parser.add_argument(
        "--config",
        type=str,
        default="campus",
        help="Campus config name (under configs/) or path.",
    )
    parser.add_argument("--from", dest="start", type=str, default=None, help="Start location label.")
    parser.add_argument("--to", dest="end", type=str, default=None, help="End location label.")
    parser.add_argument(
        "--algorithm",
        choices=ALGORITHMS,
        default=None,
        help="Routing algorithm (defaults to the config's default_algorithm).",
    )
    parser.add_argument(
        "--landmark",
        type=str,
        default=None,
        help="Also find routes through every location of this type.",
    )
    parser.add_argument("--sort-by", choices=SORT_KEYS, default=None, help="Ranking key.")
    parser.add_argument("--list-locations", action="store_true", help="Print location labels and exit.")
    parser.add_argument("--list-types", action="store_true", help="Print landmark types and exit.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def load_graph(config: str) -> tuple[Graph, dict]:
    cfg = load_campus(config)
    nodes_csv, edges_csv = data_paths(cfg)
    return load_campus_graph(nodes_csv, edges_csv), cfg


def find_routes(args: argparse.Namespace) -> int:
    graph, cfg = load_graph(args.config)
    settings = build_routing_settings(cfg)

    if args.list_locations:
        for loc in graph.locations():
            print(f"    - {loc.label}" + (f" ({loc.type})" if loc.type else ""))
        return 0
    if args.list_types:
        for t in graph.landmark_types():
            print(f"    - {t}")
        return 0

    if not args.start or not args.end:
        print("Please select both start and end locations.", file=sys.stderr)
        return 2
    start = graph.location_by_label(args.start)
    end = graph.location_by_label(args.end)
    if start is None or end is None:
        print(
            "One or both locations not found. Make sure selection matches the list.",
            file=sys.stderr,
        )
        return 2

    request = RouteRequest(
        start=start,
        end=end,
        algorithm=Algorithm.parse(args.algorithm or settings.default_algorithm),
        landmark_type=args.landmark,
        sort_by=args.sort_by or settings.sort_by,
    )
    print(format_report(plan_routes(graph, request, settings)))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return find_routes(args)


if __name__ == "__main__":
    sys.exit(main())
