# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/19 21:04:45
# @Author : Kariko Lin

"""Line based INI reader.

Each line, after trimming spaces and tabs, is one of:

    ```ini
    ; a comment, ignored (so are blank lines)
    [section]
    key = value  ; NOT a comment, `value  ; NOT a comment` is the value
    ```

The key-value pair is split on the *first* `=`.
Parsing is all-or-nothing: either a complete `IniDocument`,
or an `IniParserError` with nothing half-built left behind.
"""

import logging
from collections.abc import Iterable
from io import StringIO
from os import PathLike

import chardet

from ..abstract import FileHandler
from .consts import (
    BLANKS,
    BOM,
    COMMENT,
    DELIMITER,
    SECTION_CLOSE,
    SECTION_OPEN
)
from .errors import IniSyntaxError, ResourceError, UngroupedPairError
from .model import IniDocument


def _strip_eol(line: str) -> str:
    return line.removesuffix('\n').removesuffix('\r')


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(buf: Iterable[str]) -> IniDocument:
        """读取解码好的字符串流（或任何逐行产出`str`的可迭代对象）。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        sections: dict[str, dict[str, str]] = {}
        this_sect: dict[str, str] | None = None
        for lineno, raw in enumerate(buf, 1):
            if lineno == 1:
                # `utf-8` (unlike `utf-8-sig`) leaves the BOM in place.
                raw = raw.removeprefix(BOM)
            line = _strip_eol(raw).strip(BLANKS)
            if not line or line[0] == COMMENT:
                continue

            if line[0] == SECTION_OPEN and line[-1] == SECTION_CLOSE:
                name = line[1:-1].strip(BLANKS)
                if not name:
                    raise IniSyntaxError(line, lineno)
                # re-opening keeps whatever the section already has.
                this_sect = sections.setdefault(name, {})
                continue

            key, sep, val = line.partition(DELIMITER)
            if not sep:
                raise IniSyntaxError(line, lineno)
            if this_sect is None:
                raise UngroupedPairError(line, lineno)
            key, val = key.strip(BLANKS), val.strip(BLANKS)
            if key in this_sect:
                logging.debug(
                    f'line {lineno}: "{key}" redefined, '
                    f'"{this_sect[key]}" -> "{val}"')
            this_sect[key] = val

        logging.debug(f'parsed {len(sections)} section(s)')
        return IniDocument(sections)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        try:
            with open(filename, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            raise ResourceError(filename) from e

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        logging.info(f'decoding {filename} as {codec["encoding"]}')

        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError) as e:
            raise ResourceError(filename, 'Unable to decode file') from e
        return StringIO(buf, newline=None)

    def read(self) -> IniDocument:
        """读取`IniParser`实例指定的文件。

        文件打不开时抛`ResourceError`；无论解析成功与否，文件都会被关闭。
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            return self.readstream(self._decode_file(self._fn))
        except LookupError as e:
            raise ResourceError(self._fn, 'Unknown encoding') from e
        except OSError as e:
            raise ResourceError(self._fn) from e

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
