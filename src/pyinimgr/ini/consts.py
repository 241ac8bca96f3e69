# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/12 21:40:18
# @Author : Kariko Lin

from enum import Enum
from re import ASCII
from re import compile as regex

# both section and key names.
NAME_PATTERN = regex(r'[A-Za-z0-9]+', ASCII)
HEADER_PATTERN = regex(r'\[([A-Za-z0-9]+)\]', ASCII)

# invariant numeric text, no grouping, no python-only `_`.
INTEGER_PATTERN = regex(r'[+-]?[0-9]+', ASCII)
DOUBLE_PATTERN = regex(
    r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?', ASCII)

EOL = '\r\n'
COMMENT = ';'
DELIMITER = '='


class IniBool(str, Enum):
    TRUE = 'True'
    FALSE = 'False'


class IniFloatSymbol(str, Enum):
    POSITIVE_INFINITY = 'Infinity'
    NEGATIVE_INFINITY = '-Infinity'
    NAN = 'NaN'
