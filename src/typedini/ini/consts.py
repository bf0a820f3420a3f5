# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/19 20:31:04
# @Author : Kariko Lin

from enum import Enum

COMMENT = ';'
SECTION_OPEN = '['
SECTION_CLOSE = ']'
DELIMITER = '='
# horizontal whitespace only, `str.strip()` would also eat \v, \f etc.
BLANKS = ' \t'
BOM = '\ufeff'
# some locales write `3,14` for `3.14`.
DECIMAL_COMMA = ','


class ValueKind(str, Enum):
    INT = 'int'
    FLOAT = 'float'
    STR = 'str'


class ErrorKind(str, Enum):
    RESOURCE = 'resource'
    SYNTAX = 'syntax'
    UNGROUPED_PAIR = 'ungrouped_pair'
    SECTION_NOT_FOUND = 'section_not_found'
    KEY_NOT_FOUND = 'key_not_found'
    INVALID_INTEGER = 'invalid_integer'
    INVALID_FLOAT = 'invalid_float'
