from __future__ import annotations

import pytest

from rangecut import Bytes, Chars, ConfigError, Fields, Range, RangeSyntaxError, build_config


def test_defaults_to_stdin_and_tab() -> None:
    cfg = build_config(fields="1")
    assert cfg.files == ("-",)
    assert cfg.delimiter == "\t"
    assert cfg.mode == Fields((Range(0, 1),))


def test_each_mode_is_built_from_its_list() -> None:
    assert build_config(bytes="1-2").mode == Bytes((Range(0, 2),))
    assert build_config(chars="3,1").mode == Chars((Range(2, 3), Range(0, 1)))
    assert build_config(fields="2", delimiter=",", files=["a.csv"]).files == ("a.csv",)


def test_no_mode_is_an_error() -> None:
    with pytest.raises(ConfigError) as e:
        build_config(files=["x"])
    assert e.value.message == "Must have --fields, --bytes, or --chars"


def test_conflicting_modes_are_an_error() -> None:
    with pytest.raises(ConfigError):
        build_config(fields="1", bytes="1")
    with pytest.raises(ConfigError):
        build_config(chars="1", bytes="1")


def test_bad_delimiter_is_checked_before_lists() -> None:
    with pytest.raises(ConfigError) as e:
        build_config(delimiter=",,", fields="0")
    assert str(e.value) == '--delim ",," must be a single byte'


def test_bad_list_surfaces_token() -> None:
    with pytest.raises(RangeSyntaxError) as e:
        build_config(chars="1,foo")
    assert e.value.token == "foo"


def test_config_is_immutable() -> None:
    cfg = build_config(chars="1")
    with pytest.raises(AttributeError):
        cfg.delimiter = ","  # type: ignore[misc]
