#!/usr/bin/env python3
"""
Per parse tracking of which arguments have received a value,
and the final check that every required argument did.

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 1st party imports
import declarg.errors
from declarg._structs.parser_config import ParserConfig
from declarg._structs.registry import ArgRegistry

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ParseState:
    """ name -> received.
      Seeded True for args with a default, optional args,
      and everything when the config asks for zero defaults.
      'assigned' separately tracks names set from the command line in this parse.
    """

    def __init__(self, received:dict[str, bool]):
        self.received : dict[str, bool] = dict(received)
        self.assigned : set[str]        = set()

    @staticmethod
    def build(registry:ArgRegistry, config:ParserConfig) -> ParseState:
        return ParseState({x.name : (x.has_default or x.is_optional or config.zero_defaults) for x in registry})

    def __getitem__(self, name:str) -> bool:
        return self.received[name]

    def mark(self, name:str) -> None:
        if name not in self.received:
            raise declarg.errors.InvalidFieldName("No argument named: %s", name)
        self.received[name] = True
        self.assigned.add(name)

    def was_assigned(self, name:str) -> bool:
        return name in self.assigned

    def missing(self) -> list[str]:
        return [x for x,y in self.received.items() if not y]

def validate_complete(registry:ArgRegistry, state:ParseState) -> None:
    """ All or nothing: raise MissingArgs naming the first required arg without a value """
    missing = [x.name for x in registry if not state[x.name]]
    match missing:
        case []:
            logging.debug("All %s arguments received", len(registry))
        case [first, *_]:
            raise declarg.errors.MissingArgs("Missing required argument: %s", first, field=first, missing=missing)
