from __future__ import annotations

import re
import sys

from .errors import RangeSyntaxError
from .ranges import Range, RangeList


# ASCII digits only; ``+`` signs and other Unicode digits are rejected.
_INDEX_RE = re.compile(r"[0-9]+")
_RANGE_RE = re.compile(r"([0-9]+)-([0-9]+)")


def _illegal(token: str) -> RangeSyntaxError:
    return RangeSyntaxError(token=token, message=f'illegal list value: "{token}"')


def parse_index(token: str) -> int:
    """Parse a 1-based position and return it 0-based.

    Zero, values above ``sys.maxsize``, signs, blanks and anything that is
    not a plain run of digits raise :class:`RangeSyntaxError` naming ``token``.
    """
    if not _INDEX_RE.fullmatch(token):
        raise _illegal(token)
    n = int(token)
    # Positions are machine-sized.
    if n == 0 or n > sys.maxsize:
        raise _illegal(token)
    return n - 1


def _parse_token(token: str) -> Range:
    if _INDEX_RE.fullmatch(token):
        n = parse_index(token)
        return Range(n, n + 1)

    m = _RANGE_RE.fullmatch(token)
    if m is None:
        raise _illegal(token)
    # A zero on either side is reported against that side alone.
    n1 = parse_index(m.group(1))
    n2 = parse_index(m.group(2))
    if n1 >= n2:
        raise RangeSyntaxError(
            token=token,
            message=(
                f"First number in range ({n1 + 1}) "
                f"must be lower than second number ({n2 + 1})"
            ),
        )
    return Range(n1, n2 + 1)


def parse_ranges(text: str) -> RangeList:
    """Parse a list such as ``"1,3-5,2"`` into half-open ranges.

    Tokens keep their order and duplicates; nothing is sorted or merged.
    """
    return tuple(_parse_token(tok) for tok in text.split(","))


def format_ranges(ranges: RangeList) -> str:
    """Render ranges back into the 1-based list syntax."""
    out: list[str] = []
    for r in ranges:
        if len(r) == 1:
            out.append(str(r.end))
        else:
            out.append(f"{r.start + 1}-{r.end}")
    return ",".join(out)
