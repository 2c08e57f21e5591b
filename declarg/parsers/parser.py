#!/usr/bin/env python3
"""
The dispatch loop: scans raw arguments, matches them against a registry,
and feeds the matched value strings through value parsing and coercion.

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
import sys
from typing import Any, Iterable, Iterator

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import declarg.errors
from declarg._interface import ArgKind_e, ValueKind_e
from declarg._structs.arg_def import ArgDef
from declarg._structs.arg_value import ArgValue
from declarg._structs.parser_config import ParserConfig
from declarg._structs.registry import ArgRegistry
from declarg.parsers.coercion import coerce_field
from declarg.parsers.scanner import ArgScanner, Token
from declarg.parsers.validator import ParseState, validate_complete
from declarg.parsers.value_parser import parse_value

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ParsedArgs:
    """ The typed result of a parse.
      Values are concrete python values, keyed by definition name.
    """

    def __init__(self, registry:ArgRegistry, received:None|dict[str, bool]=None):
        self._registry              = registry
        self._values : dict[str, Any] = {}
        self.received               = dict(received or {})
        self.extras   : list[str]   = []

    def store(self, arg:ArgDef, value:Any, *, extend:bool=False) -> None:
        """ Put an already coerced value in arg's slot. With extend, lists grow instead of being replaced """
        match self._values.get(arg.name, None):
            case list() as existing if extend and isinstance(value, list):
                existing.extend(value)
            case _:
                self._values[arg.name] = value

    def __getitem__(self, name:str) -> Any:
        return self.get(name)

    def __contains__(self, name:str) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def get(self, name:str) -> Any:
        self._registry.get(name)
        return self._values.get(name, None)

    def set_field(self, name:str, value:ArgValue) -> None:
        """ Move a value into the named field. The value is disposed once coerced """
        arg = self._registry.get(name)
        with value:
            self._values[name] = coerce_field(arg, value)
        self.received[name] = True

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)

    @property
    def args(self) -> TomlGuard:
        return TomlGuard(self._values)

    def to_model(self) -> BaseModel:
        """ Validate the values into the registry's typed record model """
        return self._registry.record_model().model_validate(self._values)

    def report(self, level:int=logmod.INFO) -> None:
        for arg in self._registry:
            logging.log(level, "%s: %r", arg.name, self._values.get(arg.name, None))

    def __repr__(self):
        return f"<ParsedArgs({self._registry.name}): {self._values}>"

class ArgParser:
    """ Parses argument lists against a registry.

      parser = ArgParser(ArgRegistry([...]), ParserConfig(value_sep="="))
      result = parser.parse(["-al", "--out=build.bin", "main.orb"])
      result['out_path']

      Scanning -> ClassifyFlag -> ConsumeValue -> Scanning ... -> Done
    """

    class _ScanState(enum.Enum):
        SCANNING = enum.auto()
        CLASSIFY = enum.auto()
        CONSUME  = enum.auto()
        DONE     = enum.auto()

    def __init__(self, registry:ArgRegistry|Iterable[ArgDef|dict], config:None|ParserConfig|dict=None):
        match registry:
            case ArgRegistry():
                self.registry = registry
            case _:
                self.registry = ArgRegistry(registry)

        self.config = ParserConfig.build(config)
        self.PS     = ArgParser._ScanState

    def help_lines(self) -> list[str]:
        """ One description line per registered arg, written with this parser's prefixes """
        return [x.help_line(self.config) for x in self.registry]

    def parse(self, argv:None|list[str]=None) -> ParsedArgs:
        """ Parse argv (defaulting to sys.argv[1:]) into a ParsedArgs.
          raises InvalidValue, UnclosedDelimiter, MissingArgs.
          No partial results are returned.
        """
        argv    = list(sys.argv[1:] if argv is None else argv)
        logging.debug("Parsing args: %s", argv)
        state   = ParseState.build(self.registry, self.config)
        result  = ParsedArgs(self.registry)
        scanner = ArgScanner(argv, self.config)
        self._seed_defaults(result)

        focus   = self.PS.SCANNING
        token   = None
        pending : list[tuple[ArgDef, None|str]] = []
        while focus is not self.PS.DONE:
            match focus:
                case self.PS.SCANNING:
                    token = scanner.next_token()
                    focus = self.PS.DONE if token is None else self.PS.CLASSIFY
                case self.PS.CLASSIFY:
                    pending = self._classify(token, scanner, state, result)
                    focus   = self.PS.CONSUME
                case self.PS.CONSUME:
                    for arg, raw in pending:
                        self._assign(arg, raw, state, result)
                    pending = []
                    focus   = self.PS.SCANNING

        validate_complete(self.registry, state)
        result.received = dict(state.received)
        return result

    def _seed_defaults(self, result:ParsedArgs) -> None:
        for arg in self.registry:
            match arg:
                case ArgDef(default=ArgValue() as default):
                    result.store(arg, coerce_field(arg, default))
                case ArgDef() if arg.is_optional:
                    result.store(arg, None)
                case ArgDef() if self.config.zero_defaults:
                    with arg.type_.default_value() as zero:
                        result.store(arg, coerce_field(arg, zero))
                case _:
                    pass

    def _classify(self, token:Token, scanner:ArgScanner, state:ParseState, result:ParsedArgs) -> list[tuple[ArgDef, None|str]]:
        """ Match a token against the registry, returning (arg, raw value) pairs to assign.
          A raw value of None marks a boolean toggle.
        """
        match token.kind:
            case ArgKind_e.LONG:
                return self._classify_long(token, scanner, result)
            case ArgKind_e.SHORT:
                return self._classify_short(token, scanner, result)
            case ArgKind_e.VALUE:
                return self._classify_value(token, state, result)
            case x:
                raise ValueError("Unknown token kind", x)

    def _classify_long(self, token:Token, scanner:ArgScanner, result:ParsedArgs) -> list[tuple[ArgDef, None|str]]:
        arg = self.registry.match_long(token.name)
        if arg is None and not self.config.chaining and len(token.name) == 1:
            arg = self.registry.match_short(token.name)

        match arg:
            case None:
                logging.warning("Ignoring unrecognized flag: %s", token.raw)
                result.extras.append(token.raw)
                return []
            case ArgDef() if arg.is_boolean and token.rest is None:
                return [(arg, None)]
            case ArgDef() if token.rest is not None:
                return [(arg, token.rest)]
            case ArgDef():
                return [(arg, self._take_value(arg, token, scanner))]

    def _classify_short(self, token:Token, scanner:ArgScanner, result:ParsedArgs) -> list[tuple[ArgDef, None|str]]:
        matched = []
        for i, char in enumerate(token.name):
            match self.registry.match_short(char):
                case None:
                    logging.warning("Ignoring unrecognized short flag: %s%s", self.config.short_prefix, char)
                    result.extras.append(f"{self.config.short_prefix}{char}")
                case ArgDef() as arg if arg.is_boolean:
                    matched.append((arg, None))
                case ArgDef() as arg:
                    # The rest of the element is this flag's value, otherwise the next element is
                    tail = token.name[i+1:] + (token.rest or "")
                    tail = tail.removeprefix(self.config.value_sep)
                    raw  = tail or self._take_value(arg, token, scanner)
                    matched.append((arg, raw))
                    return matched

        if token.rest:
            logging.warning("Ignoring trailing text after short flags: %s", token.raw)
            result.extras.append(token.rest)

        return matched

    def _classify_value(self, token:Token, state:ParseState, result:ParsedArgs) -> list[tuple[ArgDef, None|str]]:
        arg = self.registry.positional
        match arg:
            case None:
                logging.warning("No positional argument for: %s", token.raw)
                result.extras.append(token.raw)
                return []
            case ArgDef() if state.was_assigned(arg.name) and not arg.is_list:
                logging.warning("Positional already set, ignoring: %s", token.raw, extra={"arg": arg.name})
                result.extras.append(token.raw)
                return []
            case ArgDef():
                return [(arg, token.raw)]

    def _take_value(self, arg:ArgDef, token:Token, scanner:ArgScanner) -> str:
        match scanner.take_value():
            case None:
                raise declarg.errors.InvalidValue("Flag expects a value: %s", token.raw, field=arg.name)
            case str() as raw:
                return raw

    def _toggle(self, arg:ArgDef) -> ArgValue:
        match arg.type_.kind:
            case ValueKind_e.OPTIONAL:
                return ArgValue.optional(ArgValue.bool_(True))
            case _:
                return ArgValue.bool_(True)

    def _assign(self, arg:ArgDef, raw:None|str, state:ParseState, result:ParsedArgs) -> None:
        try:
            parsed = self._toggle(arg) if raw is None else parse_value(arg.type_, raw, self.config)
        except declarg.errors.ParseError as err:
            raise err.with_context(field=arg.name, raw=raw)

        with parsed:
            value = coerce_field(arg, parsed)

        extend = arg.is_list and state.was_assigned(arg.name)
        logging.debug("Setting %r (extend: %s)", value, extend, extra={"arg": arg.name})
        result.store(arg, value, extend=extend)
        state.mark(arg.name)

def parse_args(defs:ArgRegistry|Iterable[ArgDef|dict], argv:None|list[str]=None, config:None|ParserConfig|dict=None) -> ParsedArgs:
    """ Build a parser and parse in one call """
    return ArgParser(defs, config).parse(argv)
