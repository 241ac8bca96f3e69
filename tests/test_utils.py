"""名称校验与值转换的测试。"""

import math

import pytest

from pyinimgr.ini.exceptions import InvalidNameError
from pyinimgr.ini.utils import (
    format_bool,
    format_double,
    is_valid_name,
    parse_bool,
    parse_char,
    parse_double,
    parse_int,
    validate_name,
)


@pytest.mark.parametrize("name", ["a", "Z", "0", "abc123", "ABCdef"])
def test_valid_names(name: str) -> None:
    assert is_valid_name(name)
    assert validate_name(name) == name


@pytest.mark.parametrize("name", ["", " a", "a b", "a-b", "ä", "a\n", None, 1])
def test_invalid_names(name: object) -> None:
    assert not is_valid_name(name)
    with pytest.raises(InvalidNameError):
        validate_name(name)  # type: ignore[arg-type]


def test_format_bool() -> None:
    assert format_bool(True) == "True"
    assert format_bool(False) == "False"


@pytest.mark.parametrize(
    ("value", "text"),
    [
        (1.0, "1.0"),
        (0.1, "0.1"),
        (-2.5, "-2.5"),
        (1e20, "1e+20"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (math.nan, "NaN"),
    ],
)
def test_format_double(value: float, text: str) -> None:
    assert format_double(value) == text


@pytest.mark.parametrize(
    ("text", "expected"),
    [("True", True), ("false", False), (" TRUE\t", True), ("1", None), ("", None)],
)
def test_parse_bool(text: str, expected: bool | None) -> None:
    assert parse_bool(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("+5", 5),
        ("-0", 0),
        (" 7 ", 7),
        ("3.5", None),
        ("1_000", None),
        ("0x10", None),
        ("1,000", None),
        ("", None),
        ("٣", None),
    ],
)
def test_parse_int(text: str, expected: int | None) -> None:
    assert parse_int(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1.5", 1.5),
        ("-2", -2.0),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
        (".5", 0.5),
        ("5.", 5.0),
        ("+0.0", 0.0),
        ("infinity", math.inf),
        ("-Infinity", -math.inf),
        ("inf", None),
        ("1_0.0", None),
        ("1,5", None),
        (".", None),
        ("e3", None),
        ("", None),
    ],
)
def test_parse_double(text: str, expected: float | None) -> None:
    assert parse_double(text) == expected


def test_parse_double_nan() -> None:
    value = parse_double("NaN")
    assert value is not None and math.isnan(value)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("x", "x"), (" x ", "x"), ("  ", " "), ("", None), ("xy", None)],
)
def test_parse_char(text: str, expected: str | None) -> None:
    assert parse_char(text) == expected


def test_parse_int_beyond_digit_limit() -> None:
    assert parse_int("9" * 5000) is None
