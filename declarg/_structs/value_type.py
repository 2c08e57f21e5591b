#!/usr/bin/env python3
"""
The closed, recursively composable set of value kinds an argument can take.

Each variant is a frozen dataclass tagged with a ValueKind_e.
Lists and Optionals wrap an inner ValueType, and can nest arbitrarily:
    ListType(OptionalType(ListType(StringType())))

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
from dataclasses import dataclass, field
from typing import (Annotated, Any, ClassVar, Literal, Optional)

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import Field, NonNegativeInt

# ##-- end 3rd party imports

# ##-- 1st party imports
from declarg._interface import NUL_CHAR, ValueKind_e
from declarg._structs.arg_value import ArgValue

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass(frozen=True)
class ValueType:
    """ Base of the value kinds. Not instantiated directly """

    kind : ClassVar[ValueKind_e]

    def inner_type(self) -> None|ValueType:
        """ The element type of lists, the wrapped type of optionals, otherwise None """
        return None

    def default_value(self) -> ArgValue:
        """ The zero-equivalent value for this kind """
        raise NotImplementedError()

    @property
    def runtime_type(self) -> type:
        """ The python type that coercion produces for this kind """
        raise NotImplementedError()

    @property
    def annotation(self) -> Any:
        """ An annotation usable as a pydantic field type """
        return self.runtime_type

    @property
    def is_boolean(self) -> bool:
        """ Bools, and optional bools, act as toggles on the command line """
        return False

@dataclass(frozen=True)
class BoolType(ValueType):
    kind : ClassVar[ValueKind_e] = ValueKind_e.BOOL

    def default_value(self) -> ArgValue:
        return ArgValue.bool_(False)

    @property
    def runtime_type(self) -> type:
        return bool

    @property
    def is_boolean(self) -> bool:
        return True

    def __str__(self):
        return "bool"

@dataclass(frozen=True)
class UintType(ValueType):
    kind : ClassVar[ValueKind_e] = ValueKind_e.UINT

    def default_value(self) -> ArgValue:
        return ArgValue.uint(0)

    @property
    def runtime_type(self) -> type:
        return int

    @property
    def annotation(self) -> Any:
        return NonNegativeInt

    def __str__(self):
        return "uint"

@dataclass(frozen=True)
class IntType(ValueType):
    kind : ClassVar[ValueKind_e] = ValueKind_e.INT

    def default_value(self) -> ArgValue:
        return ArgValue.int_(0)

    @property
    def runtime_type(self) -> type:
        return int

    def __str__(self):
        return "int"

@dataclass(frozen=True)
class RangedIntType(ValueType):
    """ A signed int, constrained to the inclusive range [min, max] """
    kind : ClassVar[ValueKind_e] = ValueKind_e.RANGED_INT

    min : int
    max : int

    def __post_init__(self):
        if self.max < self.min:
            raise ValueError("RangedInt min must be <= max", self.min, self.max)

    def default_value(self) -> ArgValue:
        return ArgValue.ranged(self.min)

    def contains(self, val:int) -> bool:
        return self.min <= val <= self.max

    @property
    def runtime_type(self) -> type:
        return int

    @property
    def annotation(self) -> Any:
        return Annotated[int, Field(ge=self.min, le=self.max)]

    def __str__(self):
        return f"int[{self.min}:{self.max}]"

@dataclass(frozen=True)
class FloatType(ValueType):
    kind : ClassVar[ValueKind_e] = ValueKind_e.FLOAT

    def default_value(self) -> ArgValue:
        return ArgValue.float_(0.0)

    @property
    def runtime_type(self) -> type:
        return float

    def __str__(self):
        return "float"

@dataclass(frozen=True)
class StringType(ValueType):
    kind : ClassVar[ValueKind_e] = ValueKind_e.STRING

    def default_value(self) -> ArgValue:
        return ArgValue.string("")

    @property
    def runtime_type(self) -> type:
        return str

    def __str__(self):
        return "str"

@dataclass(frozen=True)
class CharType(ValueType):
    kind : ClassVar[ValueKind_e] = ValueKind_e.CHAR

    def default_value(self) -> ArgValue:
        return ArgValue.char(NUL_CHAR)

    @property
    def runtime_type(self) -> type:
        return str

    @property
    def annotation(self) -> Any:
        return Annotated[str, Field(min_length=1, max_length=1)]

    def __str__(self):
        return "char"

@dataclass(frozen=True)
class ListType(ValueType):
    kind : ClassVar[ValueKind_e] = ValueKind_e.LIST

    inner : ValueType

    def inner_type(self) -> None|ValueType:
        return self.inner

    def default_value(self) -> ArgValue:
        return ArgValue.list_([])

    @property
    def runtime_type(self) -> type:
        return list

    @property
    def annotation(self) -> Any:
        return list[self.inner.annotation]

    def __str__(self):
        return f"list[{self.inner}]"

@dataclass(frozen=True)
class OptionalType(ValueType):
    kind : ClassVar[ValueKind_e] = ValueKind_e.OPTIONAL

    inner : ValueType

    def inner_type(self) -> None|ValueType:
        return self.inner

    def default_value(self) -> ArgValue:
        return ArgValue.optional()

    @property
    def runtime_type(self) -> type:
        return self.inner.runtime_type

    @property
    def annotation(self) -> Any:
        return Optional[self.inner.annotation]

    @property
    def is_boolean(self) -> bool:
        return self.inner.is_boolean

    def __str__(self):
        return f"optional[{self.inner}]"

@dataclass(frozen=True)
class EnumType(ValueType):
    """ A choice between named variants.
      Variants are declared case sensitively, but matched case insensitively.
      When built from an enum.Enum class, coercion produces its members.
    """
    kind : ClassVar[ValueKind_e] = ValueKind_e.ENUM

    variants : tuple[str, ...]
    source   : None|type[enum.Enum] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "variants", tuple(self.variants))
        if not bool(self.variants):
            raise ValueError("Enum types need at least one variant")
        if len(set(self.variants)) != len(self.variants):
            raise ValueError("Enum variants must be unique", self.variants)

    @classmethod
    def of(cls, source:type[enum.Enum]) -> EnumType:
        return cls(tuple(x.name for x in source), source=source)

    def default_value(self) -> ArgValue:
        return ArgValue.enum(0)

    def index_of(self, val:Any) -> int:
        """ Find the index of a variant given as an index, name, or enum member """
        match val:
            case bool():
                pass
            case int() if 0 <= val < len(self.variants):
                return val
            case enum.Enum() if self.source is not None and isinstance(val, self.source):
                return list(self.source).index(val)
            case str():
                lowered = val.lower()
                for i, name in enumerate(self.variants):
                    if name.lower() == lowered:
                        return i

        raise ValueError("Not a variant of the enum", val, self.variants)

    def member(self, index:int) -> Any:
        """ The concrete value for a variant index """
        match self.source:
            case None:
                return self.variants[index]
            case _:
                return list(self.source)[index]

    @property
    def runtime_type(self) -> type:
        return self.source or str

    @property
    def annotation(self) -> Any:
        match self.source:
            case None:
                return Literal[self.variants]
            case _:
                return self.source

    def __str__(self):
        return "enum[{}]".format(",".join(self.variants))


def default_value(type_:ValueType) -> ArgValue:
    return type_.default_value()

def inner_type(type_:ValueType) -> None|ValueType:
    return type_.inner_type()
