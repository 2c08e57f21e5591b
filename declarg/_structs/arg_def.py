#!/usr/bin/env python3
"""

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import (BaseModel, ConfigDict, Field, InstanceOf,
                      field_validator, model_validator)
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from declarg._interface import ValueKind_e, is_arg_char
from declarg._structs.arg_value import ArgValue
from declarg._structs.parser_config import ParserConfig
from declarg._structs.value_type import BoolType, ValueType
from declarg.utils.type_expr import build_type

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ArgDef(BaseModel):
    """ Describes a single command line argument.
      The name is the key results are stored under.
      An argument can be reached by its short flag ('-o'), long flag ('--out'),
      or, when positional, by a bare value.

      The type can be given as a ValueType, an enum class, a builtin type, or a type expression.
      The default can be given as an ArgValue, or as a plain python value.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name       : str
    short      : None|str                  = None
    long       : None|str                  = None
    positional : bool                      = False
    help       : str                       = "An undescribed argument"
    type_      : InstanceOf[ValueType]     = Field(default=BoolType(), alias="type")
    default    : None|InstanceOf[ArgValue] = None

    @staticmethod
    def build(data:ArgDef|TomlGuard|dict, **kwargs) -> ArgDef:
        match data:
            case ArgDef():
                return data
            case TomlGuard():
                as_dict = dict(data._table())
                as_dict.update(kwargs)
                return ArgDef.model_validate(as_dict)
            case dict():
                as_dict = data.copy()
                as_dict.update(kwargs)
                return ArgDef.model_validate(as_dict)
            case _:
                raise TypeError("Can not build an ArgDef from", data)

    @model_validator(mode="before")
    @classmethod
    def _build_type_and_default(cls, data:Any) -> Any:
        if not isinstance(data, dict):
            return data

        data  = dict(data)
        key   = "type" if "type" in data else "type_"
        type_ = build_type(data.get(key, BoolType()))
        data[key] = type_
        match data.get("default", None):
            case None:
                pass
            case ArgValue() as val if not val.of_type(type_):
                raise ValueError("Default value does not match the declared type", data.get("name"), str(type_))
            case ArgValue():
                pass
            case val:
                data["default"] = ArgValue.from_python(type_, val)

        return data

    @field_validator("name")
    def _validate_name(cls, val):
        if not val.isidentifier():
            raise ValueError("Argument names must be identifiers", val)
        return val

    @field_validator("short")
    def _validate_short(cls, val):
        match val:
            case None:
                return val
            case str() if len(val) == 1 and is_arg_char(val):
                return val
            case _:
                raise ValueError("Short flags must be a single argument character", val)

    @field_validator("long")
    def _validate_long(cls, val):
        match val:
            case None:
                return val
            case str() if bool(val) and all(is_arg_char(x) for x in val):
                return val
            case _:
                raise ValueError("Long flags must be made of argument characters", val)

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def is_optional(self) -> bool:
        return self.type_.kind is ValueKind_e.OPTIONAL

    @property
    def is_boolean(self) -> bool:
        return self.type_.is_boolean

    @property
    def is_list(self) -> bool:
        return self.type_.kind is ValueKind_e.LIST

    def forms(self, config:None|ParserConfig=None) -> list[str]:
        """ The ways this arg is written on the command line, using config's prefixes """
        config = ParserConfig.build(config)
        flags  = [f"{config.short_prefix}{self.short}" if self.short else None,
                  f"{config.long_prefix}{self.long}" if self.long else None,
                  f"[{self.name}]" if self.positional else None]
        return [x for x in flags if x]

    def help_line(self, config:None|ParserConfig=None) -> str:
        parts = [" ".join(self.forms(config)) or self.name,
                 f"({self.type_})",
                 f": {self.help}"]
        if self.has_default:
            parts.append(f": Defaults to: {self.default.to_python()!r}")
        return " ".join(parts)

    def __repr__(self):
        match self.forms():
            case []:
                return f"<ArgDef: {self.name}>"
            case [*_, last]:
                return f"<ArgDef: {last}>"

    def __str__(self):
        return self.help_line()
