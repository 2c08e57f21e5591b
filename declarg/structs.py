#!/usr/bin/env python3
"""
Public Access point for declarg Structures
"""
from __future__ import annotations

from declarg._structs.arg_value import ArgValue, value_matches_type
from declarg._structs.value_type import (BoolType, CharType, EnumType,
                                         FloatType, IntType, ListType,
                                         OptionalType, RangedIntType,
                                         StringType, UintType, ValueType,
                                         default_value, inner_type)
from declarg._structs.arg_def import ArgDef
from declarg._structs.parser_config import ParserConfig
from declarg._structs.registry import ArgRegistry
