#!/usr/bin/env python3
"""
Declarg : Declarative command line argument definitions,
with type directed value parsing.

    registry = ArgRegistry([
        {"name": "out_path", "long": "out", "short": "o", "type": "str"},
        {"name": "debug", "short": "d", "default": False},
    ])
    result = ArgParser(registry).parse(["-d", "--out", "build.bin"])

"""
# Imports:
from __future__ import annotations

import logging as logmod

from ._interface import __version__, ValueKind_e, ArgKind_e
from . import errors
from .structs import (ArgDef, ArgRegistry, ArgValue, BoolType, CharType,
                      EnumType, FloatType, IntType, ListType, OptionalType,
                      ParserConfig, RangedIntType, StringType, UintType,
                      ValueType)
from .parsers.value_parser import parse_value
from .parsers.coercion import coerce, coerce_field
from .parsers.parser import ArgParser, ParsedArgs, parse_args

##-- logging
logging = logmod.getLogger(__name__)
logging.addHandler(logmod.NullHandler())
##-- end logging
