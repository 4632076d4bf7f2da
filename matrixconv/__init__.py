"""
Matrix data conversion between CSV, TSV, JSON and HTML tables.

Layout
- grid.py: the shared rows-of-string-cells model + DataFrame bridge
- formats/dsv.py: CSV/TSV scanner and writer
- formats/json_matrix.py: array-of-arrays / array-of-objects JSON
- formats/html_table.py: first <table> of a document, canonical table output
- transforms.py: transpose and synthetic header
- converter.py: decode -> transform -> encode facade
- options.py, config.py, errors.py: flags, runtime knobs, exceptions
"""

from .config import ConverterConfig, configure_logging, load_config
from .converter import convert, decode, encode
from .errors import (
    ConversionError,
    DecodeError,
    EncodeError,
    UnsupportedFormatError,
    UnsupportedOptionError,
)
from .grid import Grid, grid_from_frame, grid_to_frame
from .options import ConversionOption, ConversionOptions, DataFormat
from .transforms import add_header, apply_transforms, transpose

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "convert",
    "decode",
    "encode",
    "ConverterConfig",
    "configure_logging",
    "load_config",
    "ConversionError",
    "DecodeError",
    "EncodeError",
    "UnsupportedFormatError",
    "UnsupportedOptionError",
    "Grid",
    "grid_from_frame",
    "grid_to_frame",
    "ConversionOption",
    "ConversionOptions",
    "DataFormat",
    "add_header",
    "apply_transforms",
    "transpose",
]
