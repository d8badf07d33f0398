from __future__ import annotations

from .api import cut_stream, run
from .config import Config, build_config
from .errors import ConfigError, RangeSyntaxError
from .extract import extract, extract_bytes, extract_chars, extract_fields
from .modes import Bytes, Chars, Fields, SelectionMode
from .parser import format_ranges, parse_ranges
from .ranges import Range, RangeList
from .tabular import join_record, split_record

__all__ = [
    "Bytes",
    "Chars",
    "Config",
    "ConfigError",
    "Fields",
    "Range",
    "RangeList",
    "RangeSyntaxError",
    "SelectionMode",
    "build_config",
    "cut_stream",
    "extract",
    "extract_bytes",
    "extract_chars",
    "extract_fields",
    "format_ranges",
    "join_record",
    "parse_ranges",
    "run",
    "split_record",
]
