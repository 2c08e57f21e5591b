#!/usr/bin/env python3
"""
The ordered collection of argument definitions that parameterizes a parse.

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
import pathlib as pl
from typing import Any, Iterable, Iterator

# ##-- end stdlib imports

# ##-- 3rd party imports
import more_itertools as mitz
import tomlguard
from pydantic import BaseModel, ValidationError, create_model
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import declarg.errors
from declarg._structs.arg_def import ArgDef
from declarg._structs.parser_config import ParserConfig
from declarg.utils.log_config import LoggerSpec

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ArgRegistry:
    """ An ordered, validated list of ArgDefs.
      Names, short flags, and long flags are unique,
      and there is at most one positional argument.
    """

    def __init__(self, defs:Iterable[ArgDef|dict|TomlGuard]=None, *, name:str="Args"):
        try:
            self._defs = [ArgDef.build(x) for x in (defs or [])]
        except ValidationError as err:
            raise declarg.errors.RegistryError("Invalid argument definition: %s", err) from err

        self._name       = name
        self._by_name    = {x.name : x for x in self._defs}
        self._by_short   = {x.short : x for x in self._defs if x.short is not None}
        self._by_long    = {x.long : x for x in self._defs if x.long is not None}
        self._positional = mitz.only((x for x in self._defs if x.positional),
                                     default=None,
                                     too_long=declarg.errors.RegistryError("Only one positional argument is allowed per registry"))
        self._check_unique("name", [x.name for x in self._defs])
        self._check_unique("short flag", [x.short for x in self._defs if x.short is not None])
        self._check_unique("long flag", [x.long for x in self._defs if x.long is not None])
        logging.debug("Built Registry(%s): %s", self._name, self._defs)

    ##-- loading
    @staticmethod
    def build(data:TomlGuard|dict) -> tuple[ArgRegistry, ParserConfig]:
        """ Build a registry and its parser config from a loaded table of the form:
          [logging]
          name  = "declarg"
          level = "DEBUG"

          [config]
          value_sep = "="

          [[args]]
          name = "out_path"
          long = "out"
          type = "str"
        """
        match data:
            case dict():
                data = TomlGuard(data)
            case TomlGuard():
                pass
            case _:
                raise TypeError("Can not build a registry from", data)

        match data.on_fail(None).logging():
            case None:
                pass
            case log_data:
                LoggerSpec.build(log_data).apply()

        raw_conf = data.on_fail({}).config()
        raw_defs = data.on_fail([], list).args()
        name     = data.on_fail("Args", str).name()
        try:
            config = ParserConfig.build(raw_conf)
        except ValidationError as err:
            raise declarg.errors.RegistryError("Invalid parser config: %s", err) from err

        return ArgRegistry(raw_defs, name=name), config

    @staticmethod
    def read(text:str) -> tuple[ArgRegistry, ParserConfig]:
        """ Build a registry and parser config from a toml string """
        return ArgRegistry.build(tomlguard.read(text))

    @staticmethod
    def load(path:str|pl.Path) -> tuple[ArgRegistry, ParserConfig]:
        """ Build a registry and parser config from a toml file """
        path = pl.Path(path)
        logging.info("Loading Registry from: %s", path)
        return ArgRegistry.read(path.read_text())

    ##-- end loading

    def _check_unique(self, label:str, vals:list[str]) -> None:
        match list(mitz.duplicates_everseen(vals)):
            case []:
                return
            case [*dups]:
                raise declarg.errors.RegistryError("Duplicate %s in registry: %s", label, dups)

    @property
    def name(self) -> str:
        return self._name

    @property
    def positional(self) -> None|ArgDef:
        return self._positional

    def __iter__(self) -> Iterator[ArgDef]:
        return iter(self._defs)

    def __len__(self) -> int:
        return len(self._defs)

    def __contains__(self, name:str) -> bool:
        return name in self._by_name

    def __getitem__(self, name:str) -> ArgDef:
        return self.get(name)

    def get(self, name:str) -> ArgDef:
        match self._by_name.get(name, None):
            case None:
                raise declarg.errors.InvalidFieldName("No argument named: %s", name)
            case x:
                return x

    def match_short(self, flag:str) -> None|ArgDef:
        return self._by_short.get(flag, None)

    def match_long(self, flag:str) -> None|ArgDef:
        return self._by_long.get(flag, None)

    @ftz.cached_property
    def _record_model(self) -> type[BaseModel]:
        fields : dict[str, Any] = {}
        for arg in self._defs:
            fields[arg.name] = (arg.type_.annotation, None if arg.is_optional else ...)

        return create_model(self._name, **fields)

    def record_model(self) -> type[BaseModel]:
        """ A pydantic model with a typed field for each definition """
        return self._record_model

    def __repr__(self):
        return f"<ArgRegistry({self._name}): {[x.name for x in self._defs]}>"
