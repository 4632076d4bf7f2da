"""JSON <-> grid.

Two layouts are supported:
- array of arrays (aoa): rows as JSON arrays, no row is privileged
- array of objects (aoo): row 0 holds the keys, each later row one object
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

from ..errors import DecodeError, EncodeError
from ..grid import Grid, as_cell

logger = logging.getLogger(__name__)


def _load(text: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise DecodeError(f"Invalid JSON: {e}") from e


def _dump(data: Any, indent: str, ensure_ascii: bool) -> str:
    try:
        return json.dumps(data, indent=indent, ensure_ascii=ensure_ascii)
    except (TypeError, ValueError) as e:
        raise EncodeError(f"Grid is not JSON serializable: {e}") from e


# ---------------------------
# Reading
# ---------------------------
def decode_array_of_arrays(text: str) -> Grid:
    data = _load(text)
    if not isinstance(data, list):
        raise DecodeError(f"Expected a JSON array of arrays, got {type(data).__name__}")
    grid: Grid = []
    for r, row in enumerate(data):
        if not isinstance(row, list):
            raise DecodeError(f"Row {r} is not an array: {row!r}")
        grid.append([as_cell(v) for v in row])
    logger.debug("Decoded %d rows from array-of-arrays JSON", len(grid))
    return grid


def decode_array_of_objects(text: str) -> Grid:
    """Return ``[keys of object 0, values of object 0, values of object 1, ...]``.

    Objects are assumed to share the first object's keys in the same order;
    each row is taken from its own object's value order.
    """
    data = _load(text)
    if not isinstance(data, list):
        raise DecodeError(f"Expected a JSON array of objects, got {type(data).__name__}")
    if not data:
        raise DecodeError("Array of objects is empty; no object to take field names from")
    for r, obj in enumerate(data):
        if not isinstance(obj, dict):
            raise DecodeError(f"Element {r} is not an object: {obj!r}")

    grid: Grid = [list(data[0].keys())]
    grid.extend([as_cell(v) for v in obj.values()] for obj in data)
    logger.debug("Decoded %d objects (%d fields) from array-of-objects JSON", len(data), len(grid[0]))
    return grid


# ---------------------------
# Writing
# ---------------------------
def encode_array_of_arrays(grid: Grid, indent: str = "\t", ensure_ascii: bool = False) -> str:
    return _dump(grid, indent, ensure_ascii)


def grid_to_records(grid: Grid) -> List[Dict[str, str]]:
    """Zip each body row with the header row by position.

    Keys for cells a short row lacks are left out; cells past the header's
    width are dropped.
    """
    if not grid:
        raise EncodeError("Array-of-objects output needs a header row; the grid is empty")
    headers = grid[0]
    records: List[Dict[str, str]] = []
    for row in grid[1:]:
        records.append({h: row[c] for c, h in enumerate(headers) if c < len(row)})
    return records


def encode_array_of_objects(grid: Grid, indent: str = "\t", ensure_ascii: bool = False) -> str:
    return _dump(grid_to_records(grid), indent, ensure_ascii)
