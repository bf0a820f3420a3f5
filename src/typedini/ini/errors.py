# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/19 20:40:12
# @Author : Kariko Lin

"""Errors raised while reading or querying an INI document.

Every error carries an `ErrorKind` in `.kind`,
so callers may branch on it instead of on the class.
"""

from .consts import ErrorKind


class IniParserError(Exception):
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ResourceError(IniParserError):
    """The backing file could not be opened (or decoded)."""
    kind = ErrorKind.RESOURCE

    def __init__(self, filename: str, reason: str = 'Unable to open file'):
        super().__init__(f'{reason}: {filename}')
        self.filename = filename


class IniSyntaxError(IniParserError):
    """A line is neither blank, comment, section header nor pair."""
    kind = ErrorKind.SYNTAX

    def __init__(self, line: str, lineno: int | None = None) -> None:
        super().__init__(f'Syntax error: {line}')
        self.line = line
        self.lineno = lineno


class UngroupedPairError(IniParserError):
    """A key-value pair shows up before any section header."""
    kind = ErrorKind.UNGROUPED_PAIR

    def __init__(self, line: str, lineno: int | None = None) -> None:
        super().__init__('Key-value pair found outside of any section')
        self.line = line
        self.lineno = lineno


class SectionNotFound(IniParserError, LookupError):
    kind = ErrorKind.SECTION_NOT_FOUND

    def __init__(self, section: str) -> None:
        super().__init__(f'Section not found: {section}')
        self.section = section


class KeyNotFound(IniParserError, LookupError):
    kind = ErrorKind.KEY_NOT_FOUND

    def __init__(self, section: str, key: str) -> None:
        super().__init__(f'Key not found: {key}')
        self.section = section
        self.key = key


class ConversionError(IniParserError, ValueError):
    """Raw value does not fully parse as the requested number type.

    `.value` is the raw text as stored, before any normalization.
    """
    _label = 'value'

    def __init__(self, value: str) -> None:
        super().__init__(f'Invalid {self._label} format: {value}')
        self.value = value


class IntegerConversionError(ConversionError):
    kind = ErrorKind.INVALID_INTEGER
    _label = 'integer'


class FloatConversionError(ConversionError):
    kind = ErrorKind.INVALID_FLOAT
    _label = 'double'
