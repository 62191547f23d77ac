"""
File system utilities.
"""

import csv
from pathlib import Path
import yaml


def to_path(path: str | Path) -> Path:
    """
    Convert a string or Path to a Path object.
    """
    return path if isinstance(path, Path) else Path(path)


def read_yaml(path: str | Path) -> dict:
    """
    Read a YAML file and return its contents as a dict.
    """
    with to_path(path).open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def read_csv_rows(path: str | Path) -> list[tuple[int, list[str]]]:
    """
    Read a comma-delimited table, skipping the header row and blank lines.
    Returns (line_number, stripped_cells) pairs so callers can report where a
    bad row is.
    """
    rows: list[tuple[int, list[str]]] = []
    with to_path(path).open("r", encoding="utf-8", newline="") as file:
        reader = csv.reader(file)
        for line_no, cells in enumerate(reader, start=1):
            if line_no == 1:
                continue
            if not cells or all(not c.strip() for c in cells):
                continue
            rows.append((line_no, [c.strip() for c in cells]))
    return rows
