# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:31:09
# @Author : Kariko Lin

"""
Basically INI Structure, flat `(section, key, value)` entries.

As for text <-> entries, just see `ini.codec`.
"""

from collections.abc import Callable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass

from . import codec
from .exceptions import ConversionError, ValueNotFoundError
from .utils import (
    format_bool, format_double,
    is_valid_name, validate_name,
    parse_bool, parse_char, parse_double, parse_int
)


@dataclass(frozen=True)
class Entry:
    section: str
    key: str
    value: str


class IniSectionProxy(MutableMapping[str, str]):
    """INI section view.

    Reads and writes go straight to the owning `IniConfig`,
    so a proxy never gets stale, and an emptied section simply vanishes.
    """
    def __init__(self, config: 'IniConfig', section_name: str, /) -> None:
        self._config = config
        self._name = section_name

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        if key not in self:
            raise KeyError(key)
        return self._config.get_string(self._name, key)

    def __setitem__(self, key: str, value: str | bool | int | float) -> None:
        self._config.set_variable(self._name, key, value)

    def __delitem__(self, key: str) -> None:
        if not self._config.remove_variable(self._name, key):
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return is_valid_name(key) and self._config.exists(self._name, key)

    def __len__(self) -> int:
        return len(self._config.variables(self._name))

    def __iter__(self) -> Iterator[str]:
        return iter(self._config.variables(self._name))

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self))

    def to_dict(self) -> dict[str, str]:
        return {k: self[k] for k in self}

    def get_bool(self, key: str, default: bool | None = None) -> bool:
        return self._config.get_bool(self._name, key, default)

    def get_int(self, key: str, default: int | None = None) -> int:
        return self._config.get_int(self._name, key, default)

    def get_char(self, key: str, default: str | None = None) -> str:
        return self._config.get_char(self._name, key, default)

    def get_double(self, key: str, default: float | None = None) -> float:
        return self._config.get_double(self._name, key, default)


class IniConfig(MutableMapping[str, IniSectionProxy]):
    """INI document, like:

        ```ini
        [user]      ; section (header)
        name=bob    ; key (variable) = value
        ```

    Names are ASCII alphanumerics only. With `case_sensitive=False`
    (the default) names compare lower-cased, while each entry keeps
    the casing it was first written with.

    Values are always stored as text. Typed getters convert on read,
    typed setters convert on write.

    Note: an instance is not thread-safe.
    Callers sharing one across threads have to serialize the access.
    """
    def __init__(
        self, config: str | None = None, *,
        case_sensitive: bool = False
    ) -> None:
        self.__case_sensitive = case_sensitive
        # normalized (section, key) -> entry, in insertion order.
        self.__entries: dict[tuple[str, str], Entry] = {}
        if config is not None:
            self.load_config(config)

    @property
    def case_sensitive(self) -> bool:
        return self.__case_sensitive

    @case_sensitive.setter
    def case_sensitive(self, value: bool) -> None:
        # re-index. on collision the first entry wins the casing,
        # the last one wins the value.
        entries = list(self.__entries.values())
        self.__case_sensitive = value
        self.__entries = {}
        for i in entries:
            self.set_string(i.section, i.key, i.value)

    def __normalize(self, name: str) -> str:
        return name if self.__case_sensitive else name.lower()

    def __section(self, header: str) -> str:
        return self.__normalize(validate_name(header, 'Header'))

    def __pair(self, header: str, variable: str) -> tuple[str, str]:
        section = self.__section(header)
        return section, self.__normalize(validate_name(variable))

    # text I/O

    def load_config(self, config: str, overwrite: bool = True) -> None:
        """Load INI text. `overwrite=False` merges into current entries."""
        codec.loads(config, self, overwrite)

    def save_config(self) -> str:
        """Render as INI text, sorted by section.

        Warning: It does NOT store any comments.
        """
        return codec.dumps(self)

    def __str__(self) -> str:
        return self.save_config()

    def __repr__(self) -> str:
        return '<IniConfig { .sections = %d, .entries = %d }>' % (
            len(self), len(self.__entries))

    # lookups

    def exists(self, header: str, variable: str | None = None) -> bool:
        if variable is None:
            section = self.__section(header)
            return any(s == section for s, _ in self.__entries)
        return self.__pair(header, variable) in self.__entries

    def entries(self) -> list[Entry]:
        return list(self.__entries.values())

    def sections(self) -> list[str]:
        """Distinct section names, each in its first-seen casing."""
        ret: dict[str, str] = {}
        for (section, _), entry in self.__entries.items():
            ret.setdefault(section, entry.section)
        return list(ret.values())

    def variables(self, header: str) -> list[str]:
        section = self.__section(header)
        return [e.key for (s, _), e in self.__entries.items() if s == section]

    def get_string(
        self, header: str, variable: str,
        default: str | None = None
    ) -> str:
        entry = self.__entries.get(self.__pair(header, variable))
        if entry is not None:
            return entry.value
        if default is not None:
            return default
        raise ValueNotFoundError(
            f'The variable "{variable}" does not exist '
            f'under header "{header}"!')

    def __get_converted[T](
        self, header: str, variable: str,
        converter: Callable[[str], T | None],
        default: T | None, typename: str
    ) -> T:
        entry = self.__entries.get(self.__pair(header, variable))
        value = None if entry is None else converter(entry.value)
        if value is not None:
            return value
        if default is not None:
            return default
        if entry is None:
            raise ConversionError(
                f'The variable "{variable}" does not exist '
                f'under header "{header}"!')
        raise ConversionError(
            f'"{entry.value}" could not be parsed as {typename}!')

    def get_bool(
        self, header: str, variable: str,
        default: bool | None = None
    ) -> bool:
        return self.__get_converted(
            header, variable, parse_bool, default, 'a boolean')

    def get_int(
        self, header: str, variable: str,
        default: int | None = None
    ) -> int:
        """Strict: `3.5` is NOT an integer here, no rounding at all."""
        return self.__get_converted(
            header, variable, parse_int, default, 'an integer')

    def get_char(
        self, header: str, variable: str,
        default: str | None = None
    ) -> str:
        return self.__get_converted(
            header, variable, parse_char, default, 'a character')

    def get_double(
        self, header: str, variable: str,
        default: float | None = None
    ) -> float:
        return self.__get_converted(
            header, variable, parse_double, default, 'a double')

    # mutations

    def set_string(self, header: str, variable: str, value: str) -> None:
        """Sets the value of a variable and creates it if it doesn't exist."""
        pair = self.__pair(header, variable)
        if (old := self.__entries.get(pair)) is not None:
            # keep the casing it was first written with.
            self.__entries[pair] = Entry(old.section, old.key, value)
        else:
            self.__entries[pair] = Entry(header, variable, value)

    def set_bool(self, header: str, variable: str, value: bool) -> None:
        self.set_string(header, variable, format_bool(value))

    def set_int(self, header: str, variable: str, value: int) -> None:
        """Note: values longer than `sys.get_int_max_str_digits()` digits
        (4300 by default) raise `ValueError`, as `str(int)` refuses them."""
        self.__pair(header, variable)
        try:
            text = str(int(value))
        except ValueError as e:
            raise ValueError(
                f'Unable to store as integer text: {e}') from e
        self.set_string(header, variable, text)

    def set_char(self, header: str, variable: str, value: str) -> None:
        # names first, then the value.
        self.__pair(header, variable)
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f'{value!r} is not a single character.')
        self.set_string(header, variable, value)

    def set_double(self, header: str, variable: str, value: float) -> None:
        self.set_string(header, variable, format_double(float(value)))

    def set_variable(
        self, header: str, variable: str,
        value: str | bool | int | float
    ) -> None:
        """Dispatches to the typed setter by the type of `value`."""
        # bool first, as bool is also an int.
        if isinstance(value, bool):
            self.set_bool(header, variable, value)
        elif isinstance(value, int):
            self.set_int(header, variable, value)
        elif isinstance(value, float):
            self.set_double(header, variable, value)
        elif isinstance(value, str):
            self.set_string(header, variable, value)
        else:
            raise TypeError(
                f'Unable to store {type(value).__name__} as an INI value.')

    def remove_variable(self, header: str, variable: str) -> bool:
        return self.__entries.pop(self.__pair(header, variable), None) is not None

    def remove_header(self, header: str) -> bool:
        """Removes the header and all the variables under that header."""
        section = self.__section(header)
        doomed = [pair for pair in self.__entries if pair[0] == section]
        for pair in doomed:
            del self.__entries[pair]
        return bool(doomed)

    def clear(self) -> None:
        self.__entries.clear()

    # mapping protocol, on sections.

    def __getitem__(self, key: str) -> IniSectionProxy:
        if key not in self:
            raise KeyError(key)
        return IniSectionProxy(self, key)

    def __setitem__(
        self, key: str,
        value: Mapping[str, str | bool | int | float]
    ) -> None:
        """Replace the whole section."""
        validate_name(key, 'Header')
        pairs = dict(value)  # may be a proxy of this very section.
        for k, v in pairs.items():
            validate_name(k)
            if not isinstance(v, str | bool | int | float):
                raise TypeError(
                    f'Unable to store {type(v).__name__} as an INI value.')
        self.remove_header(key)
        for k, v in pairs.items():
            self.set_variable(key, k, v)

    def __delitem__(self, key: str) -> None:
        if not self.remove_header(key):
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return is_valid_name(key) and self.exists(key)

    def __len__(self) -> int:
        return len({s for s, _ in self.__entries})

    def __iter__(self) -> Iterator[str]:
        return iter(self.sections())
