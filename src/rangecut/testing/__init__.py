from __future__ import annotations

from .corpus import generate_lines, generate_records, write_corpus_file

__all__ = ["generate_lines", "generate_records", "write_corpus_file"]
