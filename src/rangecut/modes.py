from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .ranges import RangeList


@dataclass(frozen=True, slots=True)
class Bytes:
    """Positions are byte offsets into the raw line."""

    ranges: RangeList
    name: ClassVar[str] = "bytes"


@dataclass(frozen=True, slots=True)
class Chars:
    """Positions are Unicode codepoints of the decoded line."""

    ranges: RangeList
    name: ClassVar[str] = "chars"


@dataclass(frozen=True, slots=True)
class Fields:
    """Positions are cells of a delimited record."""

    ranges: RangeList
    name: ClassVar[str] = "fields"


SelectionMode = Bytes | Chars | Fields
