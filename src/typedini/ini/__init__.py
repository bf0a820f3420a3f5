# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 21:16:53
# @Author : Kariko Lin

from .consts import ErrorKind, ValueKind
from .errors import (
    ConversionError,
    FloatConversionError,
    IniParserError,
    IniSyntaxError,
    IntegerConversionError,
    KeyNotFound,
    ResourceError,
    SectionNotFound,
    UngroupedPairError
)
from .model import IniDocument, IniSection
from .parser import IniParser
