"""Grid post-processing applied between decoding and encoding."""
from __future__ import annotations

import logging

from .grid import Grid, copy_grid, is_rectangular, width
from .options import ConversionOptions

logger = logging.getLogger(__name__)


def transpose(grid: Grid) -> Grid:
    """Swap rows and columns.

    Row 0's width decides how many rows come out; cells missing from shorter
    rows read as "" and cells past row 0's width are dropped.
    """
    return [
        [row[c] if c < len(row) else "" for row in grid]
        for c in range(width(grid))
    ]


def add_header(grid: Grid) -> Grid:
    """Prepend ``column_0 .. column_{w-1}`` where w is row 0's width."""
    if not grid:
        return []
    headers = [f"column_{c}" for c in range(width(grid))]
    return [headers] + copy_grid(grid)


def apply_transforms(grid: Grid, options: ConversionOptions) -> Grid:
    # fixed order: transpose first, then the synthetic header
    out = grid
    if options.transpose:
        if not is_rectangular(out):
            logger.debug("Transposing a ragged grid; short rows read as empty cells")
        out = transpose(out)
        logger.debug("Transposed grid to %d rows", len(out))
    if options.add_head:
        out = add_header(out)
        logger.debug("Added synthetic header of width %d", width(out))
    return out
