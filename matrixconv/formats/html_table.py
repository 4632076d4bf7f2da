"""HTML table <-> grid.

Reading uses BeautifulSoup (lxml tree builder by default) and looks only at the
first ``<table>``: ``thead th`` texts become row 0, each ``tbody tr`` one row of
its ``td`` texts.

Writing emits a fixed, tab-indented layout. With ``with_dataset`` cells carry
their 0-based ``data-col`` and body rows/cells their 0-based ``data-row``.
"""
from __future__ import annotations

import html
import logging
from typing import List

from bs4 import BeautifulSoup, FeatureNotFound

from ..errors import DecodeError, EncodeError
from ..grid import Grid

logger = logging.getLogger(__name__)


# ---------------------------
# Reading
# ---------------------------
def decode_html_table(text: str, parser: str = "lxml") -> Grid:
    if not isinstance(text, str):
        raise DecodeError(f"HTML input must be text, got {type(text).__name__}")
    try:
        soup = BeautifulSoup(text, parser)
    except FeatureNotFound as e:
        raise DecodeError(f"HTML parser {parser!r} is not available: {e}") from e

    table = soup.find("table")
    if table is None:
        raise DecodeError("No <table> element found")
    if table.find("thead") is None:
        raise DecodeError("Table has no <thead>")
    if table.find("tbody") is None:
        raise DecodeError("Table has no <tbody>")

    grid: Grid = [[th.get_text() for th in table.select("thead th")]]
    for tr in table.select("tbody tr"):
        grid.append([td.get_text() for td in tr.find_all("td")])
    logger.debug("Decoded HTML table: %d header cells, %d body rows", len(grid[0]), len(grid) - 1)
    return grid


# ---------------------------
# Writing
# ---------------------------
def _attrs(with_dataset: bool, **values: int) -> str:
    if not with_dataset:
        return ""
    return "".join(f' data-{k}="{v}"' for k, v in values.items())


def _text(cell: str, r: int, c: int) -> str:
    if not isinstance(cell, str):
        raise EncodeError(f"Cell ({r}, {c}) is not a string: {cell!r}")
    return html.escape(cell, quote=False)


def encode_html_table(grid: Grid, with_dataset: bool = False) -> str:
    if not grid:
        raise EncodeError("HTML output needs a header row; the grid is empty")
    headers, body = grid[0], grid[1:]

    ths = [
        f"\t\t\t<th{_attrs(with_dataset, col=c)}>{_text(cell, 0, c)}</th>"
        for c, cell in enumerate(headers)
    ]

    trs: List[str] = []
    for r, row in enumerate(body):
        tds = [
            f"\t\t\t<td{_attrs(with_dataset, row=r, col=c)}>{_text(cell, r + 1, c)}</td>"
            for c, cell in enumerate(row)
        ]
        trs.append(f"\t\t<tr{_attrs(with_dataset, row=r)}>\n" + "\n".join(tds) + "\n\t\t</tr>")

    return (
        "<table>\n"
        "\t<thead>\n"
        "\t\t<tr>\n"
        + "\n".join(ths) + "\n"
        "\t\t</tr>\n"
        "\t</thead>\n"
        "\t<tbody>\n"
        + "\n".join(trs) + "\n"
        "\t</tbody>\n"
        "</table>"
    )
