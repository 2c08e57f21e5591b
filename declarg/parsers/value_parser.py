#!/usr/bin/env python3
"""
Turns a raw string into an ArgValue, directed by a ValueType.

Lists are split on the configured item separator,
with quotes grouping items and backslash escaping a single character:

    'foo,bar',baz   -> ["foo,bar", "baz"]
    a\\,b,c          -> ["a,b", "c"]

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import re
from typing import Final

# ##-- end stdlib imports

# ##-- 1st party imports
import declarg.errors
from declarg._interface import (ESCAPE_CHAR, INT_MAX, INT_MIN, QUOTE_CHARS,
                                TRUE_STRS, UINT_MAX, ValueKind_e,
                                is_single_byte)
from declarg._structs.arg_value import ArgValue
from declarg._structs.parser_config import ParserConfig
from declarg._structs.value_type import EnumType, ValueType

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# An optional sign, an optional radix prefix, then digits with single underscores between them
INT_RE   : Final[re.Pattern] = re.compile(r"^[+-]?(0[xX][0-9a-fA-F](_?[0-9a-fA-F])*|0[oO][0-7](_?[0-7])*|0[bB][01](_?[01])*|[0-9](_?[0-9])*)$")

def parse_int(raw:str) -> int:
    """ Parse an int, honouring 0x, 0o and 0b radix prefixes.
      Unprefixed ints are decimal, even with leading zeros.
    """
    if not INT_RE.match(raw):
        raise declarg.errors.InvalidValue("Not an integer: %s", raw, raw=raw)

    sign, digits = "", raw
    if raw[0] in "+-":
        sign, digits = raw[0], raw[1:]

    match digits[:2].lower():
        case "0x" | "0o" | "0b":
            return int(sign + digits, 0)
        case _:
            return int(sign + digits, 10)

def parse_float(raw:str) -> float:
    if raw != raw.strip() or not bool(raw):
        raise declarg.errors.InvalidValue("Not a float: %s", raw, raw=raw)
    try:
        return float(raw)
    except ValueError:
        pass

    if "0x" not in raw.lower():
        raise declarg.errors.InvalidValue("Not a float: %s", raw, raw=raw)

    try:
        return float.fromhex(raw)
    except ValueError as err:
        raise declarg.errors.InvalidValue("Not a float: %s", raw, raw=raw) from err

def parse_bool(raw:str) -> bool:
    """ Permissive: anything unrecognised is False """
    return raw.lower() in TRUE_STRS

def split_list(raw:str, sep:str) -> list[str]:
    """ Split a raw list value into its raw items.

      - An unescaped, unquoted sep ends an item, unless the item is still empty.
      - An unescaped backslash escapes the next character, and is dropped.
      - Unescaped quotes toggle quoting, and are dropped.
      - The trailing item is always included, even when empty.
    """
    items      = []
    buf        = []
    in_quotes  = False
    is_escaped = False

    for ch in raw:
        if ch == sep and bool(buf) and not in_quotes and not is_escaped:
            items.append("".join(buf))
            buf.clear()
            continue

        if ch == ESCAPE_CHAR and not is_escaped:
            is_escaped = True
            continue

        was_escaped, is_escaped = is_escaped, False
        if ch in QUOTE_CHARS and not was_escaped:
            in_quotes = not in_quotes
            continue

        buf.append(ch)

    if in_quotes:
        raise declarg.errors.UnclosedDelimiter("List value ends inside quotes: %s", raw, raw=raw)

    items.append("".join(buf))
    return items

def resolve_enum(type_:EnumType, raw:str, config:ParserConfig) -> int:
    """ Get the variant index for raw, by index (if allowed), or by case insensitive name """
    if config.allow_index_as_enum:
        try:
            index = parse_int(raw)
        except declarg.errors.InvalidValue:
            index = None

        match index:
            case None:
                pass
            case int() if 0 <= index < len(type_.variants):
                return index
            case _:
                raise declarg.errors.InvalidValue("Enum index out of range: %s (%s variants)", raw, len(type_.variants), raw=raw)

    lowered = raw.lower()
    for i, variant in enumerate(type_.variants):
        if variant.lower() == lowered:
            return i

    raise declarg.errors.InvalidValue("Not a variant of %s: %s", type_, raw, raw=raw)

def _parse_list(type_:ValueType, raw:str, config:ParserConfig) -> ArgValue:
    elems = []
    try:
        for item in split_list(raw, config.item_sep):
            elems.append(parse_value(type_.inner, item, config))
    except declarg.errors.ParseError:
        for elem in elems:
            elem.dispose()
        raise

    logging.debug("Parsed List: %s -> %s", raw, elems)
    return ArgValue.list_(elems)

def parse_value(type_:ValueType, raw:str, config:None|ParserConfig=None) -> ArgValue:
    """ Parse raw into an ArgValue of the given type.
      The caller owns, and must dispose, the result.
      raises InvalidValue or UnclosedDelimiter
    """
    config = config or ParserConfig()
    match type_.kind:
        case ValueKind_e.BOOL:
            return ArgValue.bool_(parse_bool(raw))
        case ValueKind_e.UINT:
            val = parse_int(raw)
            if val < 0:
                raise declarg.errors.InvalidValue("Unsigned ints can not be negative: %s", raw, raw=raw)
            if UINT_MAX < val:
                raise declarg.errors.InvalidValue("Unsigned int too large: %s", raw, raw=raw)
            return ArgValue.uint(val)
        case ValueKind_e.INT:
            val = parse_int(raw)
            if not (INT_MIN <= val <= INT_MAX):
                raise declarg.errors.InvalidValue("Int out of 64 bit range: %s", raw, raw=raw)
            return ArgValue.int_(val)
        case ValueKind_e.RANGED_INT:
            val = parse_int(raw)
            if not type_.contains(val):
                raise declarg.errors.InvalidValue("Int %s outside of range [%s, %s]", val, type_.min, type_.max, raw=raw)
            return ArgValue.ranged(val)
        case ValueKind_e.FLOAT:
            return ArgValue.float_(parse_float(raw))
        case ValueKind_e.STRING:
            return ArgValue.string(str(raw))
        case ValueKind_e.CHAR if is_single_byte(raw):
            return ArgValue.char(raw)
        case ValueKind_e.CHAR:
            raise declarg.errors.InvalidValue("Chars must be a single byte: %s", raw, raw=raw)
        case ValueKind_e.OPTIONAL:
            return ArgValue.optional(parse_value(type_.inner, raw, config))
        case ValueKind_e.LIST:
            return _parse_list(type_, raw, config)
        case ValueKind_e.ENUM:
            return ArgValue.enum(resolve_enum(type_, raw, config))
        case x:
            raise declarg.errors.CoercionContractError("Unknown value kind: %s", x)
