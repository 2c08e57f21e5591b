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
from pydantic import BaseModel, ConfigDict, field_validator
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from declarg._interface import (DEFAULT_ITEM_SEP, DEFAULT_LONG_PREFIX,
                                DEFAULT_SHORT_PREFIX, DEFAULT_VALUE_SEP,
                                is_arg_char)

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ParserConfig(BaseModel):
    """ The syntax a parse recognises. Fixed for the duration of a parse.

      value_sep           : between a flag and its value. ' ' for '--out x', '=' for '--out=x'
      short_prefix        : starts a short flag, '-' for '-h', '/' for '/h'
      long_prefix         : starts a long flag, '--' for '--help', '//' for '//help'
      item_sep            : between list items, ' ' for 'a b', ',' for 'a,b'
      allow_index_as_enum : accept an enum variant's index instead of its name
      zero_defaults       : seed args lacking a default with their type's zero value
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    value_sep           : str  = DEFAULT_VALUE_SEP
    short_prefix        : str  = DEFAULT_SHORT_PREFIX
    long_prefix         : str  = DEFAULT_LONG_PREFIX
    item_sep            : str  = DEFAULT_ITEM_SEP
    allow_index_as_enum : bool = True
    zero_defaults       : bool = False

    @staticmethod
    def build(data:None|ParserConfig|TomlGuard|dict=None, **kwargs) -> ParserConfig:
        match data:
            case ParserConfig() if not bool(kwargs):
                return data
            case ParserConfig():
                return data.model_copy(update=kwargs)
            case None:
                return ParserConfig.model_validate(kwargs)
            case TomlGuard():
                as_dict = dict(data._table())
                as_dict.update(kwargs)
                return ParserConfig.model_validate(as_dict)
            case dict():
                as_dict = data.copy()
                as_dict.update(kwargs)
                return ParserConfig.model_validate(as_dict)
            case _:
                raise TypeError("Can not build a ParserConfig from", data)

    @field_validator("value_sep", "item_sep")
    def _validate_sep(cls, val):
        if len(val) != 1:
            raise ValueError("Separators must be a single character", val)
        if is_arg_char(val):
            raise ValueError("Separators can not be argument characters", val)
        return val

    @field_validator("short_prefix", "long_prefix")
    def _validate_prefix(cls, val):
        if not bool(val):
            raise ValueError("Flag prefixes can not be empty")
        if any(is_arg_char(x) for x in val):
            raise ValueError("Flag prefixes can not contain argument characters", val)
        return val

    @property
    def chaining(self) -> bool:
        """ Short flags chain ('-al' == '-a -l') only when the prefixes differ """
        return self.short_prefix != self.long_prefix
