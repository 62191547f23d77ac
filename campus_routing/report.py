"""
Plain-text rendering of route results.
"""

from campus_routing.service import RouteResult

NO_LANDMARK = "No specific landmarks"


def format_report(result: RouteResult) -> str:
    req = result.request
    lines = [
        "=== Campus Routes - Route Analysis ===",
        "",
        f"From: {req.start.label}",
        f"To: {req.end.label}",
        f"Algorithm: {req.algorithm.label}",
        f"Landmark Preference: {req.landmark_type or NO_LANDMARK}",
        "",
    ]
    if not result.routes:
        lines.append("No routes found between these locations.")
        return "\n".join(lines) + "\n"

    lines.append(f"Found {result.n_unique} route(s):")
    lines.append("")
    for n, summary in enumerate(result.routes, start=1):
        lines.append(f"--- Route {n} ---")
        lines.append("Path: " + " -> ".join(loc.label for loc in summary.route))
        lines.append(f"Distance: {summary.distance_m / 1000.0:.2f} km")
        lines.append(f"Travel Time: {summary.travel_time_min:.0f} minutes")
        if req.landmark_type:
            lines.append(f"Landmarks: {summary.landmark_count}")
        lines.append("")
    return "\n".join(lines)
