# -*- encoding: utf-8 -*-
# @File   : exceptions.py
# @Time   : 2024/10/12 21:52:03
# @Author : Kariko Lin


class IniError(Exception):
    """Base of everything raised by `pyinimgr.ini`."""
    pass


class InvalidNameError(IniError, ValueError):
    """A section or key name is not plain ASCII alphanumerics."""
    def __init__(self, msg: str) -> None:
        super().__init__(f'Invalid name: {msg}')


class ParsingError(IniError):
    """Malformed INI text, or a value that is absent / not convertible."""
    def __init__(self, msg: str, lineno: int | None = None) -> None:
        self.lineno = lineno
        if lineno is not None:
            msg = f'line {lineno}: {msg}'
        super().__init__(f'Parsing Error: {msg}')


class ValueNotFoundError(ParsingError, KeyError):
    # KeyError would quote the whole message.
    def __str__(self) -> str:
        return Exception.__str__(self)


class ConversionError(ParsingError, ValueError):
    pass
