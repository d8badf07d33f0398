from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

from .modes import Bytes, Chars, Fields, SelectionMode
from .ranges import RangeList


T = TypeVar("T")


def _select(items: Sequence[T], ranges: RangeList) -> Iterator[T]:
    # Ranges are applied in the order given; positions past the end are skipped.
    n = len(items)
    for r in ranges:
        for i in r.indices():
            if i >= n:
                break
            yield items[i]


def extract_bytes(line: str | bytes, ranges: RangeList) -> str:
    """Select byte offsets of ``line`` and decode the result.

    A cut through a multi-byte sequence comes back as U+FFFD.
    """
    raw = line.encode("utf-8") if isinstance(line, str) else line
    return bytes(_select(raw, ranges)).decode("utf-8", errors="replace")


def extract_chars(line: str, ranges: RangeList) -> str:
    return "".join(_select(line, ranges))


def extract_fields(record: Sequence[str], ranges: RangeList) -> list[str]:
    return list(_select(record, ranges))


def extract(unit: str | bytes | Sequence[str], mode: SelectionMode) -> str | list[str]:
    """Apply ``mode`` to one unit of input.

    ``unit`` is a line for :class:`Bytes` and :class:`Chars` and a record
    (sequence of cells) for :class:`Fields`.
    """
    if isinstance(mode, Bytes):
        return extract_bytes(unit, mode.ranges)  # type: ignore[arg-type]
    if isinstance(mode, Chars):
        if isinstance(unit, bytes):
            unit = unit.decode("utf-8", errors="replace")
        return extract_chars(unit, mode.ranges)  # type: ignore[arg-type]
    if isinstance(mode, Fields):
        return extract_fields(unit, mode.ranges)  # type: ignore[arg-type]
    raise TypeError(f"unknown selection mode: {type(mode)!r}")
