# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/13 00:02:37
# @Author : Kariko Lin

"""File handlers around `IniConfig`.

The INI core itself never touches disk. Whatever reads or writes files
lives here, and so does the logging.

Note: there is **no encoding detection**. Files are opened with the
given encoding (`utf-8` by default), and a wrong guess just raises.
"""

import logging
from io import TextIOBase
from warnings import warn

import yaml

from ..abstract import FileHandler
from .exceptions import ParsingError
from .model import IniConfig

logger = logging.getLogger(__name__)


class IniParser(FileHandler[IniConfig]):
    def __init__(
        self, filename: str, encoding: str = 'utf-8', *,
        case_sensitive: bool = False
    ) -> None:
        super().__init__(filename, encoding)
        self._case_sensitive = case_sensitive

    @staticmethod
    def readstream(
        buf: TextIOBase,
        ins: IniConfig | None = None,
        overwrite: bool = True
    ) -> IniConfig:
        """读取解码好的字符串流。整个流一次读完，没有分段读取。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        if ins is None:
            ins = IniConfig()
        ins.load_config(buf.read(), overwrite)
        return ins

    def read(self) -> IniConfig:
        return self.read_into(IniConfig(case_sensitive=self._case_sensitive))

    def read_into(self, ins: IniConfig, overwrite: bool = True) -> IniConfig:
        """Load the file into an existing `ins`.

        With `overwrite=False`, pairs in the file override the same pairs
        in `ins`, and the others in `ins` are left untouched.
        """
        try:
            # newline='' as the codec strips '\r' on its own.
            with open(self._fn, 'r', encoding=self._codec, newline='') as fp:
                self.readstream(fp, ins, overwrite)
        except OSError as e:
            logger.warning('INI file not readable: %s\n  %s', self._fn, e)
            raise
        logger.debug('%d entries loaded from %s', len(ins.entries()), self._fn)
        return ins

    def write(self, instance: IniConfig) -> None:
        """保存到*一个* INI 文件。CRLF 换行，按小节排序，不保留注释。"""
        try:
            # newline='' keeps CRLF from getting translated again.
            with open(self._fn, 'w', encoding=self._codec, newline='') as fp:
                fp.write(instance.save_config())
        except OSError as e:
            logger.warning('INI file not writable: %s\n  %s', self._fn, e)
            raise
        logger.debug(
            '%d entries saved to %s', len(instance.entries()), self._fn)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"


class IniYamlParser(FileHandler[IniConfig]):
    """Exchange `IniConfig` with a YAML mapping, like:

        ```yaml
        user:
          name: bob
          age: '30'
        ```

    Values are dumped as strings. Reading back accepts plain YAML scalars
    (`true`, `30`, `1.5`) too, converted to their canonical INI text.
    """
    def __init__(
        self, filename: str, encoding: str = 'utf-8', *,
        case_sensitive: bool = False
    ) -> None:
        super().__init__(filename, encoding)
        self._case_sensitive = case_sensitive

    def read(self) -> IniConfig:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                data = yaml.safe_load(fp)
        except OSError as e:
            logger.warning('YAML file not readable: %s\n  %s', self._fn, e)
            raise

        ret = IniConfig(case_sensitive=self._case_sensitive)
        if data is None:
            return ret
        if not isinstance(data, dict):
            raise ParsingError(
                f'{self._fn}: top level should be a mapping of sections.')
        for section, pairs in data.items():
            if pairs is None:
                continue
            if not isinstance(pairs, dict):
                raise ParsingError(
                    f'{self._fn}: [{section}] should be a mapping of pairs.')
            for key, value in pairs.items():
                if value is None:
                    warn(f'[{section}] {key} has no value, saved as "".')
                    value = ''
                if not isinstance(value, str | bool | int | float):
                    raise ParsingError(
                        f'{self._fn}: [{section}] {key} is not a scalar.')
                ret.set_variable(str(section), str(key), value)
        logger.debug('%d entries loaded from %s', len(ret.entries()), self._fn)
        return ret

    def write(self, instance: IniConfig) -> None:
        data = {i: instance[i].to_dict() for i in instance}
        try:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                yaml.safe_dump(
                    data, fp,
                    allow_unicode=True,
                    sort_keys=False,
                    default_flow_style=False)
        except OSError as e:
            logger.warning('YAML file not writable: %s\n  %s', self._fn, e)
            raise
        logger.debug(
            '%d entries saved to %s', len(instance.entries()), self._fn)

    def __str__(self) -> str:
        return "INI as YAML: " + super().__str__() + f"({self._codec})"
