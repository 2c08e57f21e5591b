#!/usr/bin/env python3
"""
Constants and enums shared across declarg.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
from typing import Final

# ##-- end stdlib imports

__version__ : Final[str] = "0.1.0"

##-- parser defaults
DEFAULT_VALUE_SEP       : Final[str]            = " "
DEFAULT_SHORT_PREFIX    : Final[str]            = "-"
DEFAULT_LONG_PREFIX     : Final[str]            = "--"
DEFAULT_ITEM_SEP        : Final[str]            = " "
##-- end parser defaults

TRUE_STRS               : Final[frozenset[str]] = frozenset(["true", "yes", "y", "1"])
QUOTE_CHARS             : Final[frozenset[str]] = frozenset(['"', "'"])
ESCAPE_CHAR             : Final[str]            = "\\"
NUL_CHAR                : Final[str]            = "\0"
JOIN_CHAR               : Final[str]            = " "

##-- int bounds
UINT_MAX                : Final[int]            = 2**64 - 1
INT_MIN                 : Final[int]            = -(2**63)
INT_MAX                 : Final[int]            = 2**63 - 1
##-- end int bounds

def is_arg_char(ch:str) -> bool:
    """ Argument characters make up flag names: ascii alphanumerics and underscore """
    return ch.isascii() and (ch.isalnum() or ch == "_")

class ValueKind_e(enum.Enum):
    """ The closed set of value shapes an argument can take """
    BOOL       = enum.auto()
    UINT       = enum.auto()
    INT        = enum.auto()
    RANGED_INT = enum.auto()
    FLOAT      = enum.auto()
    STRING     = enum.auto()
    CHAR       = enum.auto()
    LIST       = enum.auto()
    OPTIONAL   = enum.auto()
    ENUM       = enum.auto()

class ArgKind_e(enum.Enum):
    """ How a scanned token was classified """
    SHORT = enum.auto()
    LONG  = enum.auto()
    VALUE = enum.auto()

def is_single_byte(val:str) -> bool:
    """ Chars are a single character that encodes to a single byte """
    return len(val) == 1 and len(val.encode("utf-8")) == 1
