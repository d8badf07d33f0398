from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .errors import ConfigError
from .modes import Bytes, Chars, Fields, SelectionMode
from .parser import parse_ranges
from .tabular import validate_delimiter


STDIN = "-"
DEFAULT_DELIMITER = "\t"


@dataclass(frozen=True, slots=True)
class Config:
    """Validated settings for one run; shared read-only by every extraction."""

    files: tuple[str, ...]
    delimiter: str
    mode: SelectionMode


def build_config(
    *,
    files: Sequence[str] = (),
    delimiter: str = DEFAULT_DELIMITER,
    fields: str | None = None,
    bytes: str | None = None,
    chars: str | None = None,
) -> Config:
    """Validate raw option values into a :class:`Config`.

    Raises :class:`ConfigError` for a bad delimiter or mode combination and
    :class:`~rangecut.errors.RangeSyntaxError` for a malformed list.
    """
    delimiter = validate_delimiter(delimiter)

    given = [v for v in (fields, bytes, chars) if v is not None]
    if len(given) > 1:
        raise ConfigError("only one of --fields, --bytes or --chars may be given")

    mode: SelectionMode
    if fields is not None:
        mode = Fields(parse_ranges(fields))
    elif bytes is not None:
        mode = Bytes(parse_ranges(bytes))
    elif chars is not None:
        mode = Chars(parse_ranges(chars))
    else:
        raise ConfigError(
            "Must have --fields, --bytes, or --chars",
            hint="for example: -f 1,3 or -c 1-5",
        )

    return Config(files=tuple(files) or (STDIN,), delimiter=delimiter, mode=mode)
