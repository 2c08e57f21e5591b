#!/usr/bin/env python3
"""

"""
from __future__ import annotations

import enum
import logging as logmod

import pytest
logging = logmod.root

from pydantic import ValidationError

from declarg._structs.arg_def import ArgDef
from declarg._structs.arg_value import ArgValue
from declarg._structs.parser_config import ParserConfig
from declarg._structs import value_type as vt

class Level_e(enum.Enum):
    low  = enum.auto()
    high = enum.auto()

class TestArgDef:

    def test_initial(self):
        obj = ArgDef(name="test")
        assert(isinstance(obj, ArgDef))
        assert(obj.type_ == vt.BoolType())
        assert(not obj.has_default)

    def test_build_from_dict(self):
        obj = ArgDef.build({"name": "out_path", "long": "out", "short": "o", "type": "str"})
        assert(obj.type_ == vt.StringType())
        assert(obj.long == "out")
        assert(obj.short == "o")

    def test_type_from_enum_class(self):
        obj = ArgDef(name="level", type=Level_e)
        assert(obj.type_ == vt.EnumType(("low", "high")))

    def test_type_by_field_name(self):
        obj = ArgDef(name="count", type_=vt.UintType())
        assert(obj.type_ == vt.UintType())

    def test_plain_default_wrapped(self):
        obj = ArgDef(name="opt_level", type="uint", default=5)
        assert(obj.default == ArgValue.uint(5))

    def test_argvalue_default(self):
        obj = ArgDef(name="stdlib", type="str", default=ArgValue.string("/lib/std/"))
        assert(obj.default.payload == "/lib/std/")

    def test_default_must_match(self):
        with pytest.raises(ValidationError):
            ArgDef(name="opt_level", type="uint", default="blah")

    def test_ranged_default_must_be_in_bounds(self):
        with pytest.raises(ValidationError):
            ArgDef(name="opt_level", type=vt.RangedIntType(0, 3), default=ArgValue.ranged(5))

    def test_bad_name(self):
        with pytest.raises(ValidationError):
            ArgDef(name="out path")

    def test_bad_short(self):
        with pytest.raises(ValidationError):
            ArgDef(name="out", short="ab")

    def test_bad_long(self):
        with pytest.raises(ValidationError):
            ArgDef(name="out", long="out-path")

    def test_bad_type(self):
        with pytest.raises(ValidationError):
            ArgDef(name="out", type="blah")

    def test_immutable(self):
        obj = ArgDef(name="out")
        with pytest.raises(ValidationError):
            obj.name = "blah"

    def test_flags(self):
        assert(ArgDef(name="x", type="optional[int]").is_optional)
        assert(ArgDef(name="x", type="optional[bool]").is_boolean)
        assert(ArgDef(name="x", type="list[int]").is_list)

    def test_repr(self):
        assert(repr(ArgDef(name="out_path", long="out")) == "<ArgDef: --out>")
        assert(repr(ArgDef(name="src", positional=True, type="str")) == "<ArgDef: [src]>")

    def test_forms(self):
        obj = ArgDef(name="help", long="help", short="h")
        assert(obj.forms() == ["-h", "--help"])
        assert(obj.forms(ParserConfig(short_prefix="/", long_prefix="//")) == ["/h", "//help"])

    def test_help_line_uses_config_prefixes(self):
        obj  = ArgDef(name="out_path", long="out", short="o", type="str", help="Where to save")
        line = obj.help_line(ParserConfig(short_prefix="+", long_prefix="++"))
        assert(line.startswith("+o ++out (str)"))
        assert("--out" not in line)

    def test_str_includes_default(self):
        obj = ArgDef(name="opt", long="opt", type="uint", default=3, help="The level")
        assert("Defaults to: 3" in str(obj))
