#!/usr/bin/env python3
"""
Type expressions: a small textual form of ValueTypes,
so definitions can be written in toml:

    bool, uint, int, int[0:3], float, str, char,
    list[str], optional[list[int]], enum[hello,world]

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
import re
from typing import Any, Final

# ##-- end stdlib imports

# ##-- 1st party imports
from declarg._structs.value_type import (BoolType, CharType, EnumType,
                                         FloatType, IntType, ListType,
                                         OptionalType, RangedIntType,
                                         StringType, UintType, ValueType)

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

NAME_RE     : Final[re.Pattern] = re.compile(r"\s*([a-zA-Z_]+)\s*")
RANGE_RE    : Final[re.Pattern] = re.compile(r"^\s*([+-]?\d+)\s*:\s*([+-]?\d+)\s*$")
OPEN        : Final[str]        = "["
CLOSE       : Final[str]        = "]"

SIMPLE_TYPES : Final[dict[str, type[ValueType]]] = {
    "bool"   : BoolType,
    "uint"   : UintType,
    "int"    : IntType,
    "float"  : FloatType,
    "str"    : StringType,
    "string" : StringType,
    "char"   : CharType,
}

def _split_bracket(text:str) -> tuple[None|str, str]:
    """ Given text which may start with a bracketed body, return (body, rest) """
    if not text.startswith(OPEN):
        return None, text

    depth = 0
    for i, ch in enumerate(text):
        match ch:
            case "[":
                depth += 1
            case "]":
                depth -= 1
            case _:
                continue

        if depth == 0:
            return text[1:i], text[i+1:]

    raise ValueError("Unbalanced brackets in type expression", text)

def _parse(text:str) -> tuple[ValueType, str]:
    if not (head := NAME_RE.match(text)):
        raise ValueError("Type expression lacks a type name", text)

    name       = head[1].lower()
    body, rest = _split_bracket(text[head.end():])
    match name, body:
        case "int", str() if (bounds := RANGE_RE.match(body)):
            result = RangedIntType(int(bounds[1]), int(bounds[2]))
        case x, None if x in SIMPLE_TYPES:
            result = SIMPLE_TYPES[x]()
        case "list" | "optional", str():
            inner, leftover = _parse(body)
            if bool(leftover.strip()):
                raise ValueError("Unexpected text in type expression", leftover)
            result = ListType(inner) if name == "list" else OptionalType(inner)
        case "enum", str():
            variants = [x.strip() for x in body.split(",")]
            if not all(variants):
                raise ValueError("Empty enum variant in type expression", body)
            result = EnumType(tuple(variants))
        case _:
            raise ValueError("Unrecognized type expression", text)

    return result, rest

def parse_type_expr(text:str) -> ValueType:
    """ Parse a type expression string into a ValueType """
    result, rest = _parse(text)
    if bool(rest.strip()):
        raise ValueError("Trailing text in type expression", text)

    logging.debug("Type Expression: %s -> %s", text, result)
    return result

def build_type(val:Any) -> ValueType:
    """ Get a ValueType from a ValueType, an enum class, a builtin type, or a type expression """
    match val:
        case ValueType():
            return val
        case str():
            return parse_type_expr(val)
        case type() if issubclass(val, enum.Enum):
            return EnumType.of(val)
        case type() if val is bool:
            return BoolType()
        case type() if val is int:
            return IntType()
        case type() if val is float:
            return FloatType()
        case type() if val is str:
            return StringType()
        case type() if val is list:
            return ListType(StringType())
        case _:
            raise ValueError("Can not build a value type from", val)
