# -*- encoding: utf-8 -*-
# @File   : codec.py
# @Time   : 2024/10/12 23:14:52
# @Author : Kariko Lin

"""INI text <-> `IniConfig`, no I/O at all.

Supported lines (anything after `;` is a comment, wherever it is):

    ```ini
    [Section]       ; header, alphanumerics only
    Key=Value       ; key alphanumerics only, value may be empty
    ```

Output is rebuilt from scratch: sorted by section, comments dropped.
"""

from typing import TYPE_CHECKING

from .consts import COMMENT, DELIMITER, EOL, HEADER_PATTERN
from .exceptions import InvalidNameError, ParsingError
from .utils import is_valid_name

if TYPE_CHECKING:
    from .model import IniConfig


def loads(config: str, ins: 'IniConfig', overwrite: bool = True) -> None:
    """Parse `config` into `ins`.

    NOT transactional: on error, lines before the bad one stay applied.
    """
    if overwrite:
        ins.clear()

    current_header = ''
    for lineno, i in enumerate(config.replace('\r', '').split('\n'), 1):
        line = i.split(COMMENT, 1)[0].strip()
        if not line:
            continue

        if (match := HEADER_PATTERN.fullmatch(line)) is not None:
            current_header = match.group(1)
            continue

        if DELIMITER not in line:
            raise ParsingError(
                f'Invalid line: "{line}". Unable to extract the key/value',
                lineno)
        key, value = line.split(DELIMITER, 1)
        if not is_valid_name(key):
            raise InvalidNameError(
                f'Variable name "{key}" contains invalid characters '
                f'(line {lineno})')
        if not current_header:
            raise ParsingError(
                'Trying to define a variable without a valid header',
                lineno)
        ins.set_string(current_header, key, value)


def dumps(ins: 'IniConfig') -> str:
    # one header per section, in the casing it was first written with.
    headers: dict[str, str] = {}
    entries = []
    for i in ins.entries():
        norm = i.section if ins.case_sensitive else i.section.lower()
        entries.append((headers.setdefault(norm, i.section), i))
    # stable: keys keep insertion order within a section.
    entries.sort(key=lambda x: x[0])

    lines: list[str] = []
    current_header = None
    for header, i in entries:
        if header != current_header:
            current_header = header
            lines.extend(('', f'[{current_header}]'))
        lines.append(f'{i.key}{DELIMITER}{i.value}')
    # no blank line before the first header.
    return EOL.join(lines[1:])
