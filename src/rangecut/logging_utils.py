"""Logging setup for the ``rangecut`` command."""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger("rangecut")


def configure_logging(
    *,
    level: int = logging.WARNING,
    handler: logging.Handler | None = None,
    target_logger: logging.Logger | None = None,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Configure the package logger.

    Parameters
    ----------
    level:
        Logging level applied to the logger.
    handler:
        Optional handler to attach. When omitted a ``StreamHandler`` writing
        to ``sys.stderr`` is created, so log records never mix with the
        extracted output on stdout.
    target_logger:
        The logger to configure. Defaults to the ``rangecut`` logger, which
        stays unconfigured until this function is called.
    replace_handlers:
        When ``True`` (default) existing handlers on ``target_logger`` are
        removed before ``handler`` is attached.
    """

    configured_logger = target_logger or logger

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))

    if replace_handlers:
        configured_logger.handlers.clear()

    configured_logger.addHandler(handler)
    configured_logger.setLevel(level)
    configured_logger.propagate = False
    return configured_logger


__all__ = ["logger", "configure_logging"]
