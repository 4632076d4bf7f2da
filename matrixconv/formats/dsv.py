"""Delimiter-separated values (CSV/TSV) <-> grid.

Main entry points:
- decode_dsv(text, delimiter, options) -> Grid
- encode_dsv(grid, delimiter, no_quot) -> str

Reading rules
- A delimiter or row separator inside a quoted cell is cell content.
- ``""`` inside a quoted cell is one literal quote.
- An unquoted cell runs to the next delimiter; quotes in it are literal.
- Rows are separated by CRLF when the text contains one anywhere, else LF.
- Zero-length rows (e.g. a trailing blank line) are dropped.
- A single trailing delimiter after a quoted cell is a trailing-comma
  artifact and does not open another cell.

Malformed quoting is read best-effort: a quote followed by ordinary text ends
the quoted part and the rest of the cell is read unquoted (the stray quote is
kept, a quote right before the cell's end is dropped), so the damage stays in
one cell. An unterminated quoted cell runs to the end of the text. The scanner
makes one pass over the input.
"""
from __future__ import annotations

import logging
import re
from typing import Iterator, List, Optional

from ..errors import DecodeError, EncodeError
from ..grid import Grid, Row
from ..options import ConversionOptions

logger = logging.getLogger(__name__)

QUOTE = '"'
CRLF = "\r\n"
LF = "\n"
_LINE_BREAK = re.compile(r"\r?\n")


def detect_row_separator(text: str) -> str:
    return CRLF if CRLF in text else LF


# ---------------------------
# Newline pre-pass (rm_lf_c)
# ---------------------------
def remove_lf_in_cells(text: str) -> str:
    """Delete row separators that fall inside multi-line quoted cells.

    A physical line that does not begin with a quote is treated as the
    continuation of the previous line and merged onto it. Lines are cut on
    CRLF and bare LF alike, so an LF inside a cell of CRLF text goes too.
    Quoted cells that open mid-line are not tracked, so text whose rows start
    unquoted collapses into a single line.
    """
    sep = detect_row_separator(text)
    merged: List[str] = []
    for line in _LINE_BREAK.split(text):
        if merged and not line.startswith(QUOTE):
            merged[-1] += line
        else:
            merged.append(line)
    return sep.join(merged)


# ---------------------------
# Scanner
# ---------------------------
def _scan(text: str, delimiter: str, separator: Optional[str]) -> Iterator[Row]:
    """Yield rows of cells; ``separator=None`` reads ``text`` as one row."""
    n = len(text)
    row: Row = []
    cell: List[str] = []
    cell_quoted = False
    in_quotes = False
    trailing_artifact = False
    row_start = 0
    i = 0

    def at_boundary(pos: int) -> bool:
        if pos >= n or text.startswith(delimiter, pos):
            return True
        return separator is not None and text.startswith(separator, pos)

    while i < n:
        ch = text[i]

        if in_quotes:
            if ch == QUOTE:
                if text.startswith(QUOTE, i + 1):
                    cell.append(QUOTE)
                    i += 2
                    continue
                in_quotes = False
                if not at_boundary(i + 1):
                    # stray quote: keep it and read the rest of the cell unquoted
                    cell.append(QUOTE)
                i += 1
                continue
            cell.append(ch)
            i += 1
            continue

        if separator is not None and text.startswith(separator, i):
            if i > row_start:
                if not (trailing_artifact and not cell):
                    row.append("".join(cell))
                yield row
            row, cell = [], []
            cell_quoted = trailing_artifact = False
            i += len(separator)
            row_start = i
            continue

        if text.startswith(delimiter, i):
            row.append("".join(cell))
            i += len(delimiter)
            trailing_artifact = cell_quoted and (
                i >= n or (separator is not None and text.startswith(separator, i))
            )
            cell = []
            cell_quoted = False
            continue

        if ch == QUOTE and not cell and not cell_quoted:
            in_quotes = cell_quoted = True
            i += 1
            continue

        if ch == QUOTE and cell_quoted and at_boundary(i + 1):
            # closing quote of a cell that lost its quoting on a stray quote
            i += 1
            continue

        cell.append(ch)
        i += 1

    if n > row_start:
        if not (trailing_artifact and not cell):
            row.append("".join(cell))
        yield row


def split_dsv_row(row: str, delimiter: str = ",") -> Row:
    """Split one physical row into cells."""
    if not row:
        return [""]
    return next(_scan(row, delimiter, None))


def iter_dsv_rows(text: str, delimiter: str = ",") -> Iterator[Row]:
    return _scan(text, delimiter, detect_row_separator(text))


def decode_dsv(text: str, delimiter: str = ",", options: Optional[ConversionOptions] = None) -> Grid:
    if not isinstance(text, str):
        raise DecodeError(f"DSV input must be text, got {type(text).__name__}")
    if not delimiter or QUOTE in delimiter or "\r" in delimiter or LF in delimiter:
        raise DecodeError(f"Unusable DSV delimiter: {delimiter!r}")
    opts = options or ConversionOptions()

    if opts.rm_lf_c:
        text = remove_lf_in_cells(text)

    grid = list(iter_dsv_rows(text, delimiter))
    logger.debug("Decoded %d DSV rows (delimiter=%r, separator=%r)",
                 len(grid), delimiter, detect_row_separator(text))
    return grid


# ---------------------------
# Writing
# ---------------------------
def quote_cell(cell: str) -> str:
    return QUOTE + cell.replace(QUOTE, QUOTE * 2) + QUOTE


def encode_dsv(grid: Grid, delimiter: str = ",", no_quot: bool = False) -> str:
    """Render a grid as DSV text.

    Every cell is quoted (with embedded quotes doubled) unless ``no_quot``,
    in which case cells are written verbatim and the caller guarantees they
    hold no delimiter, quote or newline. Rows are always joined with LF and
    there is no trailing separator.
    """
    lines: List[str] = []
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if not isinstance(cell, str):
                raise EncodeError(f"Cell ({r}, {c}) is not a string: {cell!r}")
        cells = row if no_quot else [quote_cell(cell) for cell in row]
        lines.append(delimiter.join(cells))
    return LF.join(lines)
