#!/usr/bin/env python3
"""
The formatter for declarg's loggers.

Records logged with extra={"arg": name} are tagged with the argument they concern:

    logging.debug("Setting %s", val, extra={"arg": "out_path"})
    -> DEBUG    : [out_path] Setting 'build.bin'

With colour on, the line is coloured by level and the tag highlighted, using sty.
"""
##-- imports
from __future__ import annotations

import logging as logmod
from typing import ClassVar, Final

from sty import ef, fg, rs
##-- end imports

ARG_ATTR     : Final[str]            = "arg"
LEVEL_COLOUR : Final[dict[int, str]] = {
    logmod.DEBUG    : fg.grey,
    logmod.INFO     : fg.blue,
    logmod.WARNING  : fg.yellow,
    logmod.ERROR    : fg.red,
    logmod.CRITICAL : ef.bold + fg.red,
}
ARG_COLOUR   : Final[str]            = fg.cyan

class ArgLogFormatter(logmod.Formatter):
    """ Brace style. Provides {arg_tag} to the format string,
      which is '[name] ' for records about an argument, and empty otherwise.
      Colour codes are only ever added, so file handlers just leave colour off.
    """
    _default_fmt      : ClassVar[str] = "{levelname:<8} : {arg_tag}{message}"
    _default_date_fmt : ClassVar[str] = "%H:%M:%S"

    def __init__(self, *, fmt:None|str=None, colour:bool=False):
        super().__init__(fmt or self._default_fmt,
                         datefmt=self._default_date_fmt,
                         style="{")
        self.colour = colour

    def _tag(self, record:logmod.LogRecord) -> str:
        match getattr(record, ARG_ATTR, None):
            case None:
                return ""
            case name if self.colour:
                return f"{ARG_COLOUR}[{name}]{LEVEL_COLOUR.get(record.levelno, rs.fg)} "
            case name:
                return f"[{name}] "

    def format(self, record):
        record.arg_tag = self._tag(record)
        result         = super().format(record)
        if not self.colour:
            return result

        return LEVEL_COLOUR.get(record.levelno, "") + result + rs.all
