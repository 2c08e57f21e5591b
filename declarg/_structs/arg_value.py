#!/usr/bin/env python3
"""
ArgValue: a tagged, owning container for a parsed argument value.

Strings hold their text, lists own their element ArgValues,
present optionals own their inner ArgValue.
Disposal walks the tree and releases every payload exactly once.

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, ClassVar, Final, Iterable, Self)

# ##-- end stdlib imports

# ##-- 1st party imports
from declarg._interface import ValueKind_e, is_single_byte
from declarg.errors import DisposedValueError

# ##-- end 1st party imports

if TYPE_CHECKING:
    from declarg._structs.value_type import ValueType

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

_INT_KINDS : Final[frozenset[ValueKind_e]] = frozenset([ValueKind_e.UINT, ValueKind_e.INT, ValueKind_e.RANGED_INT])

def _is_int(val:Any) -> bool:
    return isinstance(val, int) and not isinstance(val, bool)

class ArgValue:
    """ A value matching one ValueType variant.

      Use as a context manager to guarantee disposal:

      with parse_value(ListType(StringType()), "a b", conf) as val:
          ...
    """
    __slots__ = ("kind", "_payload", "_disposed")

    def __init__(self, kind:ValueKind_e, payload:Any=None):
        self.kind       = kind
        self._payload   = payload
        self._disposed  = False

    ##-- constructors
    @classmethod
    def bool_(cls, val:bool) -> ArgValue:
        return cls(ValueKind_e.BOOL, bool(val))

    @classmethod
    def uint(cls, val:int) -> ArgValue:
        return cls(ValueKind_e.UINT, val)

    @classmethod
    def int_(cls, val:int) -> ArgValue:
        return cls(ValueKind_e.INT, val)

    @classmethod
    def ranged(cls, val:int) -> ArgValue:
        return cls(ValueKind_e.RANGED_INT, val)

    @classmethod
    def float_(cls, val:float) -> ArgValue:
        return cls(ValueKind_e.FLOAT, float(val))

    @classmethod
    def string(cls, val:str) -> ArgValue:
        return cls(ValueKind_e.STRING, val)

    @classmethod
    def char(cls, val:str) -> ArgValue:
        return cls(ValueKind_e.CHAR, val)

    @classmethod
    def list_(cls, vals:Iterable[ArgValue]) -> ArgValue:
        return cls(ValueKind_e.LIST, list(vals))

    @classmethod
    def optional(cls, val:None|ArgValue=None) -> ArgValue:
        return cls(ValueKind_e.OPTIONAL, val)

    @classmethod
    def enum(cls, index:int) -> ArgValue:
        return cls(ValueKind_e.ENUM, index)

    @classmethod
    def from_python(cls, type_:ValueType, obj:Any) -> ArgValue:
        """ Wrap a plain python object as an ArgValue of the given type.
          Used for defaults declared in code or in toml.
          raises ValueError when the object does not fit the type.
        """
        match obj:
            case ArgValue() if obj.of_type(type_):
                return obj
            case ArgValue():
                raise ValueError("ArgValue does not match type", repr(obj), str(type_))

        match type_.kind:
            case ValueKind_e.BOOL if isinstance(obj, bool):
                return cls.bool_(obj)
            case ValueKind_e.UINT if _is_int(obj) and 0 <= obj:
                return cls.uint(obj)
            case ValueKind_e.INT if _is_int(obj):
                return cls.int_(obj)
            case ValueKind_e.RANGED_INT if _is_int(obj) and type_.min <= obj <= type_.max:
                return cls.ranged(obj)
            case ValueKind_e.FLOAT if _is_int(obj) or isinstance(obj, float):
                return cls.float_(obj)
            case ValueKind_e.STRING if isinstance(obj, str):
                return cls.string(obj)
            case ValueKind_e.CHAR if isinstance(obj, str) and is_single_byte(obj):
                return cls.char(obj)
            case ValueKind_e.LIST if isinstance(obj, (list, tuple)):
                built = []
                try:
                    for x in obj:
                        built.append(cls.from_python(type_.inner, x))
                except ValueError:
                    for x in built:
                        x.dispose()
                    raise
                return cls.list_(built)
            case ValueKind_e.OPTIONAL if obj is None:
                return cls.optional()
            case ValueKind_e.OPTIONAL:
                return cls.optional(cls.from_python(type_.inner, obj))
            case ValueKind_e.ENUM:
                return cls.enum(type_.index_of(obj))
            case _:
                raise ValueError("Value does not fit type", obj, str(type_))

    ##-- end constructors

    @property
    def payload(self) -> Any:
        if self._disposed:
            raise DisposedValueError("Tried to read a disposed %s value", self.kind.name)
        return self._payload

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """ Release this value and everything it owns. Safe to call repeatedly """
        if self._disposed:
            return

        self._disposed = True
        self._release()

    def _release(self) -> None:
        match self.kind, self._payload:
            case ValueKind_e.LIST, list() as elems:
                for elem in elems:
                    elem.dispose()
                elems.clear()
            case ValueKind_e.OPTIONAL, ArgValue() as inner:
                inner.dispose()
            case _:
                pass

        self._payload = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, etype, err, tb) -> bool:
        self.dispose()
        return False

    def of_type(self, type_:ValueType) -> bool:
        """ Structural check of this value against a ValueType.
          RangedInts are checked against the type's *current* bounds,
          enum indices against the variant count.
        """
        if self._disposed or self.kind is not type_.kind:
            return False

        match self.kind:
            case ValueKind_e.RANGED_INT:
                return type_.min <= self._payload <= type_.max
            case ValueKind_e.UINT:
                return 0 <= self._payload
            case ValueKind_e.CHAR:
                return is_single_byte(self._payload)
            case ValueKind_e.ENUM:
                return 0 <= self._payload < len(type_.variants)
            case ValueKind_e.LIST:
                return all(x.of_type(type_.inner) for x in self._payload)
            case ValueKind_e.OPTIONAL if self._payload is None:
                return True
            case ValueKind_e.OPTIONAL:
                return self._payload.of_type(type_.inner)
            case _:
                return True

    def to_python(self) -> Any:
        """ Unwrap into plain python. Enums become their index """
        match self.kind:
            case ValueKind_e.LIST:
                return [x.to_python() for x in self.payload]
            case ValueKind_e.OPTIONAL if self.payload is None:
                return None
            case ValueKind_e.OPTIONAL:
                return self.payload.to_python()
            case _:
                return self.payload

    def __eq__(self, other) -> bool:
        match other:
            case ArgValue():
                return (self.kind is other.kind
                        and self._disposed == other._disposed
                        and self._payload == other._payload)
            case _:
                return NotImplemented

    __hash__ = None

    def __repr__(self):
        if self._disposed:
            return f"<ArgValue: {self.kind.name} (disposed)>"
        return f"<ArgValue: {self.kind.name} : {self._payload!r}>"

def value_matches_type(value:ArgValue, type_:ValueType) -> bool:
    return value.of_type(type_)
