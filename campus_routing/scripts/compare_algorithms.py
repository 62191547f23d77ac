"""
Run every routing algorithm for one pair of locations and print a
comparison table.
"""

import argparse
import logging
import sys
import time

from campus_routing.config import RoutingSettings, build_routing_settings
from campus_routing.engines import Algorithm
from campus_routing.graph import Graph
from campus_routing.models import Location
from campus_routing.scripts.find_routes import load_graph
from campus_routing.service import RouteRequest, plan_routes


def compare_algorithms(
    graph: Graph,
    start: Location,
    end: Location,
    settings: RoutingSettings,
) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for algo in Algorithm:
        start_time = time.perf_counter()
        result = plan_routes(graph, RouteRequest(start=start, end=end, algorithm=algo), settings)
        elapsed_ms = 1000.0 * (time.perf_counter() - start_time)
        best = result.routes[0] if result.routes else None
        rows.append(
            {
                "algorithm": algo.value,
                "routes": len(result.routes),
                "distance_m": best.distance_m if best else None,
                "time_min": best.travel_time_min if best else None,
                "elapsed_ms": elapsed_ms,
            }
        )
    return rows


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare routing algorithms on one pair.")
    parser.add_argument("--config", type=str, default="campus")
    parser.add_argument("--from", dest="start", type=str, required=True)
    parser.add_argument("--to", dest="end", type=str, required=True)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    graph, cfg = load_graph(args.config)
    start = graph.location_by_label(args.start)
    end = graph.location_by_label(args.end)
    if start is None or end is None:
        print("One or both locations not found.", file=sys.stderr)
        return 2

    print("----------------------------------------------------------------------")
    print(f"{start.label} -> {end.label}")
    print("----------------------------------------------------------------------")
    for row in compare_algorithms(graph, start, end, build_routing_settings(cfg)):
        dist = "-" if row["distance_m"] is None else f"{row['distance_m']:.0f} m"
        mins = "-" if row["time_min"] is None else f"{row['time_min']:.1f} min"
        print(
            f"    - {row['algorithm']:<17} routes={row['routes']}  "
            f"best={dist:>8} {mins:>10}  ({row['elapsed_ms']:.2f} ms)"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
