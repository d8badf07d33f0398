"""Delimited records for field mode.

Parsing and quoting follow the ``csv`` module's RFC 4180 style: a cell that
holds the delimiter, a double quote or a line break is written quoted, with
inner quotes doubled.
"""

from __future__ import annotations

import csv
import io
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .errors import ConfigError


def validate_delimiter(delimiter: str) -> str:
    # One UTF-8 byte means one ASCII character.
    if len(delimiter) != 1 or ord(delimiter) > 0x7F:
        raise ConfigError(f'--delim "{delimiter}" must be a single byte')
    return delimiter


# The csv reader's default cell cap is 128 KiB; records here are unbounded.
# C long is 32 bits on some platforms.
_FIELD_SIZE_LIMIT = min(sys.maxsize, 2**31 - 1)


def read_records(stream: Iterable[str], delimiter: str) -> Iterator[list[str]]:
    """Yield each record of ``stream`` as a list of cells. No header row."""
    if csv.field_size_limit() < _FIELD_SIZE_LIMIT:
        csv.field_size_limit(_FIELD_SIZE_LIMIT)
    return csv.reader(stream, delimiter=delimiter, quotechar='"')


def split_record(line: str, delimiter: str) -> list[str]:
    return next(read_records([line], delimiter), [])


def join_record(cells: Iterable[str], delimiter: str) -> str:
    """Serialize one record without a line terminator."""
    buf = io.StringIO()
    # QUOTE_MINIMAL only quotes line breaks found in the terminator, so
    # format with "\r\n" and strip it.
    csv.writer(
        buf,
        delimiter=delimiter,
        quotechar='"',
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\r\n",
    ).writerow(cells)
    return buf.getvalue()[:-2]


class RecordWriter:
    """Write records to a text stream, one per ``\\n`` terminated line."""

    def __init__(self, stream: TextIO, delimiter: str) -> None:
        self._stream = stream
        self._delimiter = delimiter

    def write(self, cells: Iterable[str]) -> None:
        self._stream.write(join_record(cells, self._delimiter) + "\n")
