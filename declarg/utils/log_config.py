#!/usr/bin/env python3
"""
Toml or dict defined logging control for declarg's loggers.

    LoggerSpec.build({"name": "declarg", "level": "DEBUG", "target": "stderr", "colour": True}).apply()

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
from sys import stderr, stdout
from typing import ClassVar, Final

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, field_validator
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from declarg.utils.log_colour import ArgLogFormatter

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

TARGETS : Final[list[str]] = ["stdout", "stderr", "pass"]

class LoggerSpec(BaseModel):
    """
      A Spec for defining a logger.
      Names the logger, sets its level, format, colour,
      and where it logs to: stdout, stderr, or a file path.

      When 'apply' is called, it gets the logger,
      and sets any relevant settings on it.
    """

    name      : str
    disabled  : bool            = False
    level     : str|int         = logmod.WARNING
    format    : None|str        = None
    colour    : bool            = False
    target    : str|pl.Path     = "stderr"
    propagate : bool            = False

    RootName  : ClassVar[str]   = "root"

    @staticmethod
    def build(data:LoggerSpec|TomlGuard|dict, **kwargs) -> LoggerSpec:
        match data:
            case LoggerSpec():
                return data
            case TomlGuard():
                as_dict = dict(data._table())
                as_dict.update(kwargs)
                return LoggerSpec.model_validate(as_dict)
            case dict():
                as_dict = data.copy()
                as_dict.update(kwargs)
                return LoggerSpec.model_validate(as_dict)
            case _:
                raise TypeError("Can not build a LoggerSpec from", data)

    @field_validator("level")
    def _validate_level(cls, val):
        match val:
            case int():
                return val
            case str() if val.upper() in logmod.getLevelNamesMapping():
                return logmod.getLevelNamesMapping()[val.upper()]
            case _:
                raise ValueError("Unknown log level", val)

    @field_validator("target")
    def _validate_target(cls, val):
        match val:
            case str() if val in TARGETS:
                return val
            case str():
                return pl.Path(val)
            case pl.Path():
                return val
            case _:
                raise ValueError("Unknown target value for LoggerSpec", val)

    def _build_handler(self) -> None|logmod.Handler:
        match self.target:
            case "pass":
                return None
            case "stdout":
                handler = logmod.StreamHandler(stdout)
            case "stderr":
                handler = logmod.StreamHandler(stderr)
            case pl.Path() as path:
                handler = logmod.FileHandler(path, mode="w")

        # Never write colour codes into files
        colour = self.colour and not isinstance(handler, logmod.FileHandler)
        handler.setFormatter(ArgLogFormatter(fmt=self.format, colour=colour))

        handler.setLevel(self.level)
        return handler

    def get(self) -> logmod.Logger:
        if self.name == self.RootName:
            return logmod.root
        return logmod.getLogger(self.name)

    def clear(self) -> None:
        """ Clear the handlers for the logger referenced """
        logger = self.get()
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

    def apply(self) -> logmod.Logger:
        """ Apply this spec to the relevant logger """
        logger           = self.get()
        logger.propagate = self.propagate
        logger.disabled  = self.disabled
        if self.disabled:
            return logger

        self.clear()
        logger.setLevel(self.level)
        match self._build_handler():
            case None:
                pass
            case handler:
                logger.addHandler(handler)

        logging.debug("Applied Logger Spec: %s", self.name)
        return logger

    def set_level(self, level:int|str) -> None:
        match level:
            case str():
                level = logmod.getLevelNamesMapping().get(level.upper(), logmod.NOTSET)
            case int():
                pass
        logger = self.get()
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
