# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 20:01:52
# @Author : Kariko Lin

from .ini import (
    ConversionError,
    ErrorKind,
    FloatConversionError,
    IniDocument,
    IniParser,
    IniParserError,
    IniSection,
    IniSyntaxError,
    IntegerConversionError,
    KeyNotFound,
    ResourceError,
    SectionNotFound,
    UngroupedPairError,
    ValueKind
)

__all__ = [
    'IniDocument', 'IniSection', 'IniParser', 'ValueKind',
    'IniParserError', 'ErrorKind', 'ResourceError',
    'IniSyntaxError', 'UngroupedPairError',
    'SectionNotFound', 'KeyNotFound',
    'ConversionError', 'IntegerConversionError', 'FloatConversionError'
]
