"""The shared intermediate model: a list of rows, each a list of string cells.

Rows may be ragged; nothing here pads or trims unless asked to. A grid lives
for one conversion call and is never cached.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, List

if TYPE_CHECKING:
    import pandas as pd

Row = List[str]
Grid = List[Row]


def width(grid: Grid) -> int:
    """Width of the header row (row 0), 0 for an empty grid."""
    return len(grid[0]) if grid else 0


def max_width(grid: Grid) -> int:
    return max((len(row) for row in grid), default=0)


def is_rectangular(grid: Grid) -> bool:
    return len({len(row) for row in grid}) <= 1


def copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def as_cell(value: Any) -> str:
    # JSON scalars other than strings keep their literal spelling (30, true, null)
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


# ---------------------------
# DataFrame bridge (pandas is imported on first use)
# ---------------------------
def _pad(row: Row, n: int) -> Row:
    return list(row) + [""] * (n - len(row))


def grid_to_frame(grid: Grid, header: bool = True) -> pd.DataFrame:
    """Return the grid as a DataFrame of str cells.

    With ``header`` row 0 becomes the column labels; header cells missing for
    wider body rows are named ``column_<i>``. Short rows are padded with "".
    """
    import pandas as pd  # type: ignore

    if not grid:
        return pd.DataFrame(dtype=str)
    n = max_width(grid)
    if header:
        columns = [
            grid[0][i] if i < len(grid[0]) else f"column_{i}"
            for i in range(n)
        ]
        body = grid[1:]
    else:
        columns = list(range(n))
        body = grid
    rows = [_pad(row, n) for row in body]
    return pd.DataFrame(rows, columns=columns, dtype=str)


def grid_from_frame(df: pd.DataFrame, header: bool = True) -> Grid:
    """Inverse of ``grid_to_frame``; missing values become ""."""
    import pandas as pd  # type: ignore

    out: Grid = []
    if header:
        out.append([str(c) for c in df.columns])
    for values in df.itertuples(index=False, name=None):
        out.append(["" if pd.isna(v) else str(v) for v in values])
    return out
