"""Format adapters between text and the shared grid."""

from .dsv import decode_dsv, encode_dsv, remove_lf_in_cells, split_dsv_row
from .html_table import decode_html_table, encode_html_table
from .json_matrix import (
    decode_array_of_arrays,
    decode_array_of_objects,
    encode_array_of_arrays,
    encode_array_of_objects,
)

__all__ = [
    "decode_dsv",
    "encode_dsv",
    "remove_lf_in_cells",
    "split_dsv_row",
    "decode_html_table",
    "encode_html_table",
    "decode_array_of_arrays",
    "decode_array_of_objects",
    "encode_array_of_arrays",
    "encode_array_of_objects",
]
