"""Exception hierarchy for matrix conversions.

Every error raised by the package derives from ``ConversionError`` so callers
can report a failed conversion with a single ``except`` clause.
"""
from __future__ import annotations


class ConversionError(Exception):
    """Base class for all matrixconv errors."""


class DecodeError(ConversionError):
    """Input text is malformed for its declared format.

    This includes:
    - invalid JSON literals or JSON of the wrong shape
    - HTML without a ``table``/``thead``/``tbody`` structure
    - DSV text the row scanner cannot process
    """


class EncodeError(ConversionError):
    """A grid cannot be rendered in the requested output format.

    This includes:
    - an empty grid given to an encoder that needs a header row
    - cells that are not strings
    """


class UnsupportedFormatError(ConversionError):
    """Format tag outside csv, tsv, aoa, aoo and html."""


class UnsupportedOptionError(ConversionError):
    """Option name outside the known conversion flags."""
