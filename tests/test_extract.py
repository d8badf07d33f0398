from __future__ import annotations

import pytest

from rangecut import Bytes, Chars, Fields, Range, extract, extract_bytes, extract_chars, extract_fields


def R(*pairs: tuple[int, int]) -> tuple[Range, ...]:
    return tuple(Range(a, b) for a, b in pairs)


def test_extract_chars() -> None:
    assert extract_chars("", R((0, 1))) == ""
    assert extract_chars("ábc", R((0, 1))) == "á"
    assert extract_chars("ábc", R((0, 1), (2, 3))) == "ác"
    assert extract_chars("ábc", R((0, 3))) == "ábc"
    assert extract_chars("ábc", R((2, 3), (1, 2))) == "cb"
    assert extract_chars("ábc", R((0, 1), (1, 2), (4, 5))) == "áb"


def test_extract_bytes() -> None:
    assert extract_bytes("ábc", R((0, 1))) == "�"
    assert extract_bytes("ábc", R((0, 2))) == "á"
    assert extract_bytes("ábc", R((0, 3))) == "áb"
    assert extract_bytes("ábc", R((0, 4))) == "ábc"
    assert extract_bytes("ábc", R((3, 4), (2, 3))) == "cb"
    assert extract_bytes("ábc", R((0, 2), (5, 6))) == "á"


def test_extract_bytes_accepts_raw_bytes() -> None:
    assert extract_bytes(b"\xc3\xa1bc", R((2, 4))) == "bc"
    assert extract_bytes(b"\xff\xfeab", R((2, 4), (0, 1))) == "ab�"


def test_extract_fields() -> None:
    rec = ["Captain", "Sham", "12345"]
    assert extract_fields(rec, R((0, 1))) == ["Captain"]
    assert extract_fields(rec, R((1, 2))) == ["Sham"]
    assert extract_fields(rec, R((0, 1), (2, 3))) == ["Captain", "12345"]
    assert extract_fields(rec, R((0, 1), (3, 4))) == ["Captain"]
    assert extract_fields(rec, R((1, 2), (0, 1))) == ["Sham", "Captain"]


def test_overlapping_ranges_repeat_output() -> None:
    assert extract_chars("abcd", R((0, 2), (1, 3))) == "abbc"
    assert extract_fields(["a", "b"], R((1, 2), (1, 2))) == ["b", "b"]


def test_empty_range_list_gives_empty_output() -> None:
    assert extract_chars("abc", ()) == ""
    assert extract_bytes("abc", ()) == ""
    assert extract_fields(["a", "b"], ()) == []


def test_extract_dispatches_on_mode() -> None:
    ranges = R((0, 1))
    assert extract("ábc", Bytes(ranges)) == "�"
    assert extract("ábc", Chars(ranges)) == "á"
    assert extract(b"\xc3\xa1bc", Chars(ranges)) == "á"
    assert extract(["x", "y"], Fields(ranges)) == ["x"]


def test_extract_is_repeatable() -> None:
    mode = Chars(R((2, 3), (0, 1)))
    assert extract("hello", mode) == extract("hello", mode) == "lh"


def test_extract_rejects_unknown_mode() -> None:
    with pytest.raises(TypeError):
        extract("abc", object())  # type: ignore[arg-type]
