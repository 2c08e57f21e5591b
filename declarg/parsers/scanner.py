#!/usr/bin/env python3
"""
Classifies raw command line arguments into flag and value tokens.

The argument list is treated as one space joined string,
with the original element boundaries remembered,
so a value token always ends where its element ended.

A run of argument characters (alphanumeric or underscore)
directly after the long prefix is a long flag, after the short prefix a short flag run.
The long prefix is checked first, as the short prefix is often a prefix of it ('-' vs '--').
A long flag followed by anything other than the value separator ('--dry-run')
is kept as a long flag token named by everything after the prefix, which no definition can match.
Everything else is a value.

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass
from typing import Iterator

# ##-- end stdlib imports

# ##-- 1st party imports
from declarg._interface import JOIN_CHAR, ArgKind_e, is_arg_char
from declarg._structs.parser_config import ParserConfig

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass(frozen=True)
class Token:
    """ A classified argument element.
      name : the flag name, or run of short flag characters. Empty for values.
      rest : for long flags, the value after the value separator in the same element.
             for short flags, whatever follows the run in the same element.
      raw  : the full element text
    """
    kind : ArgKind_e
    name : str
    rest : None|str
    raw  : str

class ArgScanner:
    """ A forward only cursor over the joined arguments.
      next_token classifies the next element, take_value consumes the next element as a value.
    """

    def __init__(self, argv:list[str], config:ParserConfig):
        self.config  = config
        self.text    = JOIN_CHAR.join(argv)
        self.spans   = []
        self.index   = 0
        start        = 0
        for arg in argv:
            self.spans.append((start, start + len(arg)))
            start += len(arg) + len(JOIN_CHAR)

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()) is not None:
            yield token

    @property
    def exhausted(self) -> bool:
        return len(self.spans) <= self.index

    def _run_from(self, pos:int, end:int) -> str:
        """ The run of argument characters starting at pos """
        cursor = pos
        while cursor < end and is_arg_char(self.text[cursor]):
            cursor += 1
        return self.text[pos:cursor]

    def _flag_run(self, start:int, end:int, prefix:str) -> None|str:
        if not self.text.startswith(prefix, start, end):
            return None
        return self._run_from(start + len(prefix), end) or None

    def next_token(self) -> None|Token:
        if self.exhausted:
            return None

        start, end = self.spans[self.index]
        self.index += 1
        raw        = self.text[start:end]

        if (name := self._flag_run(start, end, self.config.long_prefix)) is not None:
            after = start + len(self.config.long_prefix) + len(name)
            match self.text[after:end]:
                case "":
                    token = Token(ArgKind_e.LONG, name, None, raw)
                case str() as tail if tail.startswith(self.config.value_sep):
                    token = Token(ArgKind_e.LONG, name, tail[len(self.config.value_sep):], raw)
                case _:
                    # Not a valid long name, so it can never match, but it is still a flag
                    token = Token(ArgKind_e.LONG, self.text[start + len(self.config.long_prefix):end], None, raw)
        elif (name := self._flag_run(start, end, self.config.short_prefix)) is not None:
            after = start + len(self.config.short_prefix) + len(name)
            token = Token(ArgKind_e.SHORT, name, self.text[after:end] or None, raw)
        else:
            token = Token(ArgKind_e.VALUE, "", None, raw)

        logging.debug("Scanned: %s", token)
        return token

    def take_value(self) -> None|str:
        """ Consume the next element whole, as a value, regardless of prefixes """
        if self.exhausted:
            return None

        start, end = self.spans[self.index]
        self.index += 1
        return self.text[start:end]
