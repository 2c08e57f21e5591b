#!/usr/bin/env python3
"""
Moves generically parsed ArgValues into the concrete python values
a definition's slot expects.

A kind mismatch here is a contract violation between the value parser
and the registry, never bad user input, so it raises CoercionContractError.

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any, Final

# ##-- end stdlib imports

# ##-- 1st party imports
import declarg.errors
from declarg._interface import ValueKind_e
from declarg._structs.arg_def import ArgDef
from declarg._structs.arg_value import ArgValue
from declarg._structs.value_type import ValueType

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Kinds which share a runtime slot
SIGNED_KINDS : Final[frozenset[ValueKind_e]] = frozenset([ValueKind_e.INT, ValueKind_e.RANGED_INT])

def _compatible(value:ArgValue, type_:ValueType) -> bool:
    match value.kind, type_.kind:
        case x, y if x is y:
            return True
        case x, y if x in SIGNED_KINDS and y in SIGNED_KINDS:
            return True
        case _:
            return False

def coerce(type_:ValueType, value:ArgValue) -> Any:
    """ Convert a parsed value into the concrete value for a slot of type_.
      Lists are rebuilt into a fresh list, optionals unwrap to None or their coerced inner value.
    """
    if not _compatible(value, type_):
        raise declarg.errors.CoercionContractError("Value of kind %s can not fill a slot of type %s", value.kind.name, str(type_))

    match type_.kind:
        case ValueKind_e.RANGED_INT if not type_.contains(value.payload):
            raise declarg.errors.CoercionContractError("Value %s outside the slot's range %s", value.payload, str(type_))
        case ValueKind_e.BOOL | ValueKind_e.UINT | ValueKind_e.INT | ValueKind_e.RANGED_INT:
            return value.payload
        case ValueKind_e.FLOAT:
            return float(value.payload)
        case ValueKind_e.STRING | ValueKind_e.CHAR:
            return str(value.payload)
        case ValueKind_e.LIST:
            return [coerce(type_.inner, x) for x in value.payload]
        case ValueKind_e.OPTIONAL if value.payload is None:
            return None
        case ValueKind_e.OPTIONAL:
            return coerce(type_.inner, value.payload)
        case ValueKind_e.ENUM if 0 <= value.payload < len(type_.variants):
            return type_.member(value.payload)
        case ValueKind_e.ENUM:
            raise declarg.errors.CoercionContractError("Enum index %s out of range for %s", value.payload, str(type_))
        case x:
            raise declarg.errors.CoercionContractError("Unknown value kind: %s", x)

def coerce_field(arg:ArgDef, value:ArgValue) -> Any:
    """ Coerce a value into the slot for a definition, naming the definition on failure """
    try:
        return coerce(arg.type_, value)
    except declarg.errors.CoercionContractError as err:
        raise declarg.errors.CoercionContractError("Field %s: %s", arg.name, str(err)) from err
