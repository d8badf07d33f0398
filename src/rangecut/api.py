from __future__ import annotations

import contextlib
import csv
import io
import logging
import sys
from collections.abc import Iterator
from typing import BinaryIO, ContextManager, TextIO

from .config import STDIN, Config
from .extract import extract
from .modes import Fields, SelectionMode
from .parser import format_ranges
from .tabular import RecordWriter, read_records


logger = logging.getLogger(__name__)


def open_input(name: str) -> ContextManager[BinaryIO]:
    if name == STDIN:
        # Never close the process's stdin.
        return contextlib.nullcontext(sys.stdin.buffer)
    return open(name, "rb")


def iter_lines(stream: BinaryIO) -> Iterator[bytes]:
    """Yield raw lines with their ``\\n`` or ``\\r\\n`` terminator removed."""
    for raw in stream:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        yield raw


def _cut_records(stream: BinaryIO, mode: Fields, delimiter: str, out: TextIO) -> None:
    text = io.TextIOWrapper(stream, encoding="utf-8", errors="replace", newline="")
    try:
        writer = RecordWriter(out, delimiter)
        # A blank line is an empty record and yields an empty output line.
        for record in read_records(text, delimiter):
            writer.write(extract(record, mode))
    finally:
        # Hand the binary stream back to its owner instead of closing it.
        text.detach()


def cut_stream(stream: BinaryIO, mode: SelectionMode, delimiter: str, out: TextIO) -> None:
    """Run ``mode`` over every unit of ``stream`` and write the results to ``out``."""
    if isinstance(mode, Fields):
        _cut_records(stream, mode, delimiter, out)
        return

    # Bytes mode slices the raw line; chars mode decodes it first.
    for line in iter_lines(stream):
        out.write(f"{extract(line, mode)}\n")


def _describe(err: Exception) -> str:
    if isinstance(err, OSError) and err.strerror:
        return err.strerror
    return str(err)


def run(config: Config, *, stdout: TextIO | None = None, stderr: TextIO | None = None) -> int:
    """Cut every input named in ``config``.

    A file that cannot be opened or read is reported on ``stderr`` as
    ``<file>: <cause>`` and skipped. Returns 0 when every file was processed
    and 1 otherwise.
    """
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    mode = config.mode
    logger.debug("selecting %s %s", mode.name, format_ranges(mode.ranges) or "<none>")

    failed = 0
    for name in config.files:
        logger.debug("reading %s", name)
        try:
            with open_input(name) as stream:
                cut_stream(stream, mode, config.delimiter, out)
        except BrokenPipeError:
            raise
        except (OSError, csv.Error) as e:
            failed += 1
            logger.info("skipping %s: %s", name, e)
            print(f"{name}: {_describe(e)}", file=err)

    return 1 if failed else 0
