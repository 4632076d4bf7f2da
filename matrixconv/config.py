"""Runtime knobs for conversions.

Defaults can be overridden with environment variables; pass an explicit
``ConverterConfig`` to ``convert`` for per-call settings.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass
class ConverterConfig:
    # JSON output
    json_indent: str = os.getenv("MATRIXCONV_JSON_INDENT", "\t")
    json_ensure_ascii: bool = bool(int(os.getenv("MATRIXCONV_JSON_ASCII", "0")))

    # BeautifulSoup tree builder used to read HTML tables
    html_parser: str = os.getenv("MATRIXCONV_HTML_PARSER", "lxml")

    log_level: str = os.getenv("MATRIXCONV_LOG_LEVEL", "WARNING")


def load_config() -> ConverterConfig:
    return ConverterConfig()


def configure_logging(config: ConverterConfig | None = None) -> None:
    """Install a root handler for applications that embed the converter."""
    cfg = config or load_config()
    logging.basicConfig(
        level=getattr(logging, cfg.log_level.upper(), logging.WARNING),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
