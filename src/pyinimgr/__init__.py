# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:35:10
# @Author : Kariko Lin

import logging

from .ini import (
    IniConfig, IniSectionProxy, Entry,
    IniParser, IniYamlParser,
    IniError, InvalidNameError, ParsingError,
    ValueNotFoundError, ConversionError,
    is_valid_name
)

__all__ = [
    'IniConfig', 'IniSectionProxy', 'Entry',
    'IniParser', 'IniYamlParser',
    'IniError', 'InvalidNameError', 'ParsingError',
    'ValueNotFoundError', 'ConversionError',
    'is_valid_name'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
