"""Format-to-format conversion through the shared grid.

    convert(text, "csv", "html", ["add_ds"])

runs decode -> transpose/add_head -> encode. The grid and options are local
to each call; nothing is kept between calls.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Optional, Union

from .config import ConverterConfig, load_config
from .errors import ConversionError, DecodeError, EncodeError
from .formats.dsv import decode_dsv, encode_dsv
from .formats.html_table import decode_html_table, encode_html_table
from .formats.json_matrix import (
    decode_array_of_arrays,
    decode_array_of_objects,
    encode_array_of_arrays,
    encode_array_of_objects,
)
from .grid import Grid
from .options import ConversionOption, ConversionOptions, DataFormat
from .transforms import apply_transforms

logger = logging.getLogger(__name__)

FormatLike = Union[str, DataFormat]
OptionsLike = Union[ConversionOptions, Iterable[Union[str, ConversionOption]], None]


def _decoder(fmt: DataFormat, options: ConversionOptions, cfg: ConverterConfig) -> Callable[[str], Grid]:
    if fmt.is_dsv:
        return lambda text: decode_dsv(text, fmt.delimiter, options)
    decoders: Dict[DataFormat, Callable[[str], Grid]] = {
        DataFormat.AOA: decode_array_of_arrays,
        DataFormat.AOO: decode_array_of_objects,
        DataFormat.HTML: lambda text: decode_html_table(text, cfg.html_parser),
    }
    return decoders[fmt]


def _encoder(fmt: DataFormat, options: ConversionOptions, cfg: ConverterConfig) -> Callable[[Grid], str]:
    if fmt.is_dsv:
        return lambda grid: encode_dsv(grid, fmt.delimiter, options.no_quot)
    encoders: Dict[DataFormat, Callable[[Grid], str]] = {
        DataFormat.AOA: lambda grid: encode_array_of_arrays(grid, cfg.json_indent, cfg.json_ensure_ascii),
        DataFormat.AOO: lambda grid: encode_array_of_objects(grid, cfg.json_indent, cfg.json_ensure_ascii),
        DataFormat.HTML: lambda grid: encode_html_table(grid, options.add_ds),
    }
    return encoders[fmt]


def decode(input_value: str, input_format: FormatLike,
           options: OptionsLike = None, config: Optional[ConverterConfig] = None) -> Grid:
    """Read ``input_value`` into a grid. Only ``rm_lf_c`` affects decoding."""
    fmt = DataFormat.from_string(input_format)
    opts = ConversionOptions.coerce(options)
    cfg = config or load_config()
    try:
        return _decoder(fmt, opts, cfg)(input_value)
    except ConversionError:
        raise
    except Exception as e:
        raise DecodeError(f"Could not read {fmt.value} input: {e}") from e


def encode(grid: Grid, output_format: FormatLike,
           options: OptionsLike = None, config: Optional[ConverterConfig] = None) -> str:
    """Render ``grid``. Only ``no_quot`` and ``add_ds`` affect encoding."""
    fmt = DataFormat.from_string(output_format)
    opts = ConversionOptions.coerce(options)
    cfg = config or load_config()
    try:
        return _encoder(fmt, opts, cfg)(grid)
    except ConversionError:
        raise
    except Exception as e:
        raise EncodeError(f"Could not write {fmt.value} output: {e}") from e


def convert(input_value: str, input_format: FormatLike, output_format: FormatLike,
            options: OptionsLike = None, config: Optional[ConverterConfig] = None) -> str:
    """Convert ``input_value`` from one format to another.

    Args:
        input_value: Text in ``input_format``.
        input_format: One of csv, tsv, aoa, aoo, html.
        output_format: One of csv, tsv, aoa, aoo, html.
        options: Flag names (transpose, add_head, no_quot, add_ds, rm_lf_c)
            or a ``ConversionOptions``.
        config: Formatting knobs; defaults to ``load_config()``.

    Returns:
        The converted text.

    Raises:
        ConversionError: Any failure; nothing partial is returned.
    """
    cfg = config or load_config()
    try:
        src = DataFormat.from_string(input_format)
        dst = DataFormat.from_string(output_format)
        opts = ConversionOptions.coerce(options)
        logger.debug("Converting %s -> %s with options %s", src.value, dst.value, opts.names())

        grid = decode(input_value, src, opts, cfg)
        grid = apply_transforms(grid, opts)
        return encode(grid, dst, opts, cfg)
    except ConversionError as e:
        logger.error("Conversion %s -> %s failed: %s", input_format, output_format, e)
        raise
