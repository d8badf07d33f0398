from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open interval [start, end) over 0-based positions.

    User-facing syntax is 1-based and inclusive on both ends; ``"3-5"``
    becomes ``Range(2, 5)``.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.start >= self.end:
            raise ValueError(f"invalid range [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def indices(self) -> Iterator[int]:
        return iter(range(self.start, self.end))

    def __repr__(self) -> str:
        return f"{self.start}..{self.end}"


# Insertion order is the user's order; duplicates and overlaps are kept.
RangeList = tuple[Range, ...]
