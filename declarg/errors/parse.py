#!/usr/bin/env python3
"""
Errors raised while turning raw strings into typed values.
These are the errors a user's input can cause.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"InvalidValue",
"MissingArgs",
"ParseError",
"UnclosedDelimiter",

)
# ##-- end Generated Exports

from ._base import BackendError

class ParseError(BackendError):
    """ In the course of parsing CLI input, a failure occurred.
      Carries the definition name and raw input, once known.
    """
    general_msg = "Declarg CLI Parsing Failure:"

    def __init__(self, *args, field:None|str=None, raw:None|str=None):
        super().__init__(*args)
        self.field = field
        self.raw   = raw

    def __str__(self):
        base = super().__str__()
        match self.field, self.raw:
            case None, None:
                return base
            case str(), None:
                return f"{base} (field: {self.field})"
            case None, str():
                return f"{base} (input: {self.raw!r})"
            case _:
                return f"{base} (field: {self.field}, input: {self.raw!r})"

    def with_context(self, *, field:None|str=None, raw:None|str=None) -> ParseError:
        """ Fill in missing context, without overwriting context from deeper in the parse """
        self.field = self.field or field
        if self.raw is None:
            self.raw = raw
        return self

class InvalidValue(ParseError):
    """ A raw string does not satisfy the grammar or bounds of its target type """
    general_msg = "Invalid Value:"
    pass

class UnclosedDelimiter(ParseError):
    """ A list value ended while still inside a quoted span """
    general_msg = "Unclosed Delimiter:"
    pass

class MissingArgs(ParseError):
    """ Required arguments received no value by the end of the scan """
    general_msg = "Missing Arguments:"

    def __init__(self, *args, missing:None|list[str]=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.missing = list(missing or [])
