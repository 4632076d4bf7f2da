"""Format tags and conversion flags.

Formats
- csv / tsv: delimiter-separated values (``,`` and tab)
- aoa: JSON array of arrays
- aoo: JSON array of objects, row 0 supplies the keys
- html: a single HTML table

Flags are independent and order-irrelevant; each one only touches the phase
it belongs to (decode, grid transform or encode).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from .errors import UnsupportedFormatError, UnsupportedOptionError


class DataFormat(Enum):
    CSV = "csv"
    TSV = "tsv"
    AOA = "aoa"
    AOO = "aoo"
    HTML = "html"

    @classmethod
    def from_string(cls, value: Union[str, "DataFormat"]) -> "DataFormat":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            known = [f.value for f in cls]
            raise UnsupportedFormatError(f"Unknown format: {value!r}. Must be one of: {known}") from None

    @property
    def delimiter(self) -> Optional[str]:
        """Cell delimiter for DSV formats, None otherwise."""
        return _DELIMITERS.get(self)

    @property
    def is_dsv(self) -> bool:
        return self in _DELIMITERS


_DELIMITERS = {DataFormat.CSV: ",", DataFormat.TSV: "\t"}


class ConversionOption(Enum):
    TRANSPOSE = "transpose"
    ADD_HEAD = "add_head"
    NO_QUOT = "no_quot"
    ADD_DS = "add_ds"
    RM_LF_C = "rm_lf_c"

    @classmethod
    def from_string(cls, value: Union[str, "ConversionOption"]) -> "ConversionOption":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            known = [o.value for o in cls]
            raise UnsupportedOptionError(f"Unknown option: {value!r}. Must be one of: {known}") from None


@dataclass(frozen=True)
class ConversionOptions:
    transpose: bool = False
    add_head: bool = False
    no_quot: bool = False
    add_ds: bool = False
    rm_lf_c: bool = False

    @classmethod
    def from_names(cls, names: Iterable[Union[str, ConversionOption]] = ()) -> "ConversionOptions":
        """Build options from flag names, e.g. ``["transpose", "no_quot"]``.

        A bare string is treated as a single flag name.
        """
        if isinstance(names, (str, ConversionOption)):
            names = [names]
        flags = {ConversionOption.from_string(n).value: True for n in names}
        return cls(**flags)

    @classmethod
    def coerce(cls, value: Union["ConversionOptions", Iterable[Union[str, ConversionOption]], None]) -> "ConversionOptions":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.from_names(value)

    def names(self) -> list[str]:
        return [o.value for o in ConversionOption if getattr(self, o.value)]
