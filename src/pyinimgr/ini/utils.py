# -*- encoding: utf-8 -*-
# @File   : utils.py
# @Time   : 2024/10/12 22:06:41
# @Author : Kariko Lin

"""Name checks and value <-> text conversions shared by model and codec.

Parsers follow the "try parse" manner: `None` on failure, never raise.
"""

from math import inf, isinf, isnan, nan

from .consts import (
    DOUBLE_PATTERN, INTEGER_PATTERN, NAME_PATTERN,
    IniBool, IniFloatSymbol
)
from .exceptions import InvalidNameError

_FLOAT_SYMBOLS = {
    'infinity': inf,
    '+infinity': inf,
    '-infinity': -inf,
    'nan': nan,
}


def is_valid_name(name: object) -> bool:
    return isinstance(name, str) and NAME_PATTERN.fullmatch(name) is not None


def validate_name(name: str, kind: str = 'Variable') -> str:
    if not is_valid_name(name):
        raise InvalidNameError(
            f'{kind} name "{name}" contains invalid characters')
    return name


def format_bool(value: bool) -> str:
    return (IniBool.TRUE if value else IniBool.FALSE).value


def format_double(value: float) -> str:
    if isnan(value):
        return IniFloatSymbol.NAN.value
    if isinf(value):
        return (IniFloatSymbol.POSITIVE_INFINITY if value > 0
                else IniFloatSymbol.NEGATIVE_INFINITY).value
    # shortest text that reads back to the same float.
    return repr(value)


def parse_bool(text: str) -> bool | None:
    text = text.strip().lower()
    if text == IniBool.TRUE.lower():
        return True
    if text == IniBool.FALSE.lower():
        return False
    return None


def parse_int(text: str) -> int | None:
    text = text.strip()
    if INTEGER_PATTERN.fullmatch(text) is None:
        return None
    try:
        return int(text)
    except ValueError:
        # beyond `sys.get_int_max_str_digits()`.
        return None


def parse_double(text: str) -> float | None:
    text = text.strip()
    if text.lower() in _FLOAT_SYMBOLS:
        return _FLOAT_SYMBOLS[text.lower()]
    if DOUBLE_PATTERN.fullmatch(text) is None:
        return None
    return float(text)


def parse_char(text: str) -> str | None:
    """A one-char value, or `' '` for a value made of blanks only."""
    stripped = text.strip()
    if len(stripped) == 1:
        return stripped
    if not stripped and text:
        return ' '
    return None
