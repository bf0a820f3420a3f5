# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/19 20:57:10
# @Author : Kariko Lin

"""
Read-only INI structure, with typed lookups.

Raw values are kept as text; conversion happens only when queried.
To build one, see `ini.parser`.
"""

from collections.abc import Mapping
from re import ASCII, IGNORECASE
from re import compile as regex
from typing import Iterator

from .consts import DECIMAL_COMMA, ValueKind
from .errors import (
    FloatConversionError,
    IntegerConversionError,
    KeyNotFound,
    SectionNotFound,
)

INT_LITERAL = regex(r'[+-]?[0-9]+', ASCII)
FLOAT_LITERAL = regex(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?'
    r'|inf(?:inity)?|nan)',
    ASCII | IGNORECASE
)


def to_int(raw: str) -> int:
    # `int()` alone would accept `1_000` and surrounding whitespace.
    if INT_LITERAL.fullmatch(raw) is None:
        raise IntegerConversionError(raw)
    return int(raw)


def to_float(raw: str) -> float:
    normalized = raw.replace(DECIMAL_COMMA, '.')
    if FLOAT_LITERAL.fullmatch(normalized) is None:
        raise FloatConversionError(raw)
    return float(normalized)


def to_str(raw: str) -> str:
    return raw


CONVERTERS = {
    ValueKind.INT: to_int,
    ValueKind.FLOAT: to_float,
    ValueKind.STR: to_str,
}


class IniSection(Mapping[str, str]):
    """INI 小节。只读的`key: raw value`字典视图。

    值一律为`str`（可以是空串）；需要数值请走`IniDocument.get_*()`。
    """

    def __init__(self, section_name: str, /, pairs: dict[str, str]) -> None:
        self._name = section_name
        self._data = pairs

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        """Detached copy of the pairs."""
        return self._data.copy()


class IniDocument(Mapping[str, IniSection]):
    """INI 文件表示，解析完成后只读。支持以下形式（`;`开头为注释）：

        ```ini
        [Section1]
        var1 = 42       ; get_int()   -> 42
        var2 = hello    ; get_str()   -> 'hello'
        var3 = 3,14     ; get_float() -> 3.14
        ```

    `doc[section][key]`走标准`Mapping`协议，找不到时抛`KeyError`；
    `get_value()`一族则抛`SectionNotFound`/`KeyNotFound`。
    """

    def __init__(self, sections: Mapping[str, dict[str, str]]) -> None:
        # copy, so that the parser (or anyone) cannot touch us later.
        self.__raw_dicts: dict[str, dict[str, str]] = {
            name: dict(pairs) for name, pairs in sections.items()
        }

    def __getitem__(self, key: str) -> IniSection:
        if key not in self:
            raise KeyError(key)
        return IniSection(key, self.__raw_dicts[key])

    def __contains__(self, key: object) -> bool:
        return key in self.__raw_dicts

    def __len__(self) -> int:
        return len(self.__raw_dicts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw_dicts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IniDocument):
            return self.__raw_dicts == other.__raw_dicts
        return NotImplemented

    def __repr__(self) -> str:
        return f'<IniDocument sections={list(self.__raw_dicts)!r}>'

    def has_option(self, section: str, key: str) -> bool:
        return key in self.__raw_dicts.get(section, {})

    def get_raw(self, section: str, key: str) -> str:
        """Stored text for `key` in `section`, without conversion."""
        try:
            pairs = self.__raw_dicts[section]
        except KeyError:
            raise SectionNotFound(section) from None
        try:
            return pairs[key]
        except KeyError:
            raise KeyNotFound(section, key) from None

    def get_value(
        self, section: str, key: str,
        kind: ValueKind | str = ValueKind.STR
    ) -> int | float | str:
        """按`kind`转换并返回`section`小节中`key`的值。

        - `INT`：十进制有符号整数，必须整串匹配，否则`IntegerConversionError`。
        - `FLOAT`：先把`,`换成`.`，再整串按浮点数解析，否则`FloatConversionError`
        （错误里带的是*原始*值）。
        - `STR`：原样返回。

        未知的`kind`属于调用方的问题，直接抛`ValueError`。
        """
        convert = CONVERTERS[ValueKind(kind)]
        return convert(self.get_raw(section, key))

    def get_int(self, section: str, key: str) -> int:
        return to_int(self.get_raw(section, key))

    def get_float(self, section: str, key: str) -> float:
        return to_float(self.get_raw(section, key))

    def get_str(self, section: str, key: str) -> str:
        return self.get_raw(section, key)
