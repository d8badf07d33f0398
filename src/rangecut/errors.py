from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class RangeSyntaxError(Exception):
    """A position list that does not follow the ``N`` / ``N-M`` grammar."""

    token: str
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class ConfigError(Exception):
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nhint: {self.hint}"
        return self.message
