"""
Campus configuration loading and validation utilities.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from campus_routing.engines import Algorithm
from campus_routing.io import read_yaml


PROJECT_ROOT = Path(__file__).resolve().parents[1]  # Project root directory.
DEFAULT_CONFIG_DIR = PROJECT_ROOT / "configs"       # Default configuration directory.

ALGORITHMS = tuple(a.value for a in Algorithm)
SORT_KEYS = ("distance", "time", "landmarks")


@dataclass
class RoutingSettings:
    """
    Routing options of a campus config.
    """
    default_algorithm: str = "dijkstra"
    speed_override_kmph: float = 0.0
    max_landmark_routes: int = 3
    max_display_routes: int = 5
    sort_by: str = "distance"
    critical_path_max_passes: int | None = None


def resolve_config_path(name_or_path: str | Path) -> Path:
    """
    Resolve a YAML config file path.
    """
    p = Path(name_or_path)
    if p.exists():
        return p
    if not p.suffix:
        candidate = DEFAULT_CONFIG_DIR / f"{p.name}.yaml"
        if candidate.exists():
            return candidate
    candidate = DEFAULT_CONFIG_DIR / p.name
    if candidate.exists():
        return candidate
    raise FileNotFoundError(f"Config not found: {name_or_path}")


def load_yaml_config(name_or_path: str | Path) -> dict:
    """
    Load a YAML config file content.
    """
    path = resolve_config_path(name_or_path)
    cfg = read_yaml(path)
    if not isinstance(cfg, dict):
        raise ValueError(f"Invalid YAML at {path}")
    return cfg


def load_campus(name_or_path: str | Path = "campus") -> dict:
    """
    Load a campus YAML config file content.
    """
    cfg = load_yaml_config(name_or_path)
    _validate_campus(cfg)
    return cfg


def data_paths(cfg: dict[str, Any]) -> tuple[Path, Path]:
    """
    Get the node and edge table paths of a campus config. Relative paths are
    taken from the project root.
    """
    data = cfg["data"]
    return _from_root(data["nodes_csv"]), _from_root(data["edges_csv"])


def build_routing_settings(cfg: dict[str, Any]) -> RoutingSettings:
    """
    Build the routing settings from a campus config, using defaults for
    missing keys.
    """
    r = cfg.get("routing") or {}
    defaults = RoutingSettings()
    max_passes = r.get("critical_path_max_passes", defaults.critical_path_max_passes)
    return RoutingSettings(
        default_algorithm=str(r.get("default_algorithm", defaults.default_algorithm)),
        speed_override_kmph=float(r.get("speed_override_kmph", defaults.speed_override_kmph)),
        max_landmark_routes=int(r.get("max_landmark_routes", defaults.max_landmark_routes)),
        max_display_routes=int(r.get("max_display_routes", defaults.max_display_routes)),
        sort_by=str(r.get("sort_by", defaults.sort_by)),
        critical_path_max_passes=None if max_passes is None else int(max_passes),
    )


def _from_root(path: str | Path) -> Path:
    p = Path(path)
    return p if p.is_absolute() else PROJECT_ROOT / p


def _validate_campus(cfg: dict[str, Any]) -> None:
    """
    Validate a campus YAML config file content. Requires:
        - data: nodes_csv and edges_csv.
        - routing (optional): known default_algorithm and sort_by; positive
          route counts and pass bound; non-negative speed override.
    """
    data = cfg.get("data")
    if not isinstance(data, dict):
        raise ValueError("campus missing key: data")
    for k in ["nodes_csv", "edges_csv"]:
        if not data.get(k):
            raise ValueError(f"data missing key: {k}")
    r = cfg.get("routing") or {}
    if not isinstance(r, dict):
        raise ValueError("routing must be a mapping")
    if r.get("default_algorithm", "dijkstra") not in ALGORITHMS:
        raise ValueError(f"routing.default_algorithm must be one of {', '.join(ALGORITHMS)}")
    if r.get("sort_by", "distance") not in SORT_KEYS:
        raise ValueError(f"routing.sort_by must be one of {', '.join(SORT_KEYS)}")
    for kk in ["max_landmark_routes", "max_display_routes"]:
        if kk in r and (not isinstance(r[kk], int) or r[kk] <= 0):
            raise ValueError(f"routing.{kk} must be a positive int")
    max_passes = r.get("critical_path_max_passes")
    if max_passes is not None and (not isinstance(max_passes, int) or max_passes <= 0):
        raise ValueError("routing.critical_path_max_passes must be a positive int or null")
    speed = r.get("speed_override_kmph", 0)
    if not isinstance(speed, (int, float)) or speed < 0:
        raise ValueError("routing.speed_override_kmph must be a non-negative number")
