# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:38:27
# @Author : Kariko Lin

from .exceptions import (
    IniError,
    InvalidNameError,
    ParsingError,
    ValueNotFoundError,
    ConversionError
)
from .model import Entry, IniSectionProxy, IniConfig
from .parser import IniParser, IniYamlParser
from .utils import is_valid_name
