#!/usr/bin/env python3
"""

"""
from __future__ import annotations

import enum
import logging as logmod

import pytest
logging = logmod.root

from pydantic import ValidationError

import declarg.errors
from declarg._structs.arg_def import ArgDef
from declarg._structs.registry import ArgRegistry
from declarg._structs import value_type as vt

class Mode_e(enum.Enum):
    fast = enum.auto()
    slow = enum.auto()

TOML_TEXT = """
name = "Compiler"

[config]
value_sep = "="
item_sep  = ","

[[args]]
name       = "sources"
positional = true
type       = "str"

[[args]]
name    = "opt_level"
long    = "opt"
short   = "O"
type    = "int[0:3]"
default = 2

[[args]]
name = "libraries"
long = "libs"
type = "list[str]"
"""

class TestArgRegistry:

    def test_initial(self):
        obj = ArgRegistry([ArgDef(name="a"), {"name": "b", "type": "int"}])
        assert(len(obj) == 2)
        assert([x.name for x in obj] == ["a", "b"])
        assert("b" in obj)

    def test_get(self):
        obj = ArgRegistry([ArgDef(name="a")])
        assert(obj.get("a").name == "a")
        assert(obj["a"] is obj.get("a"))

    def test_get_missing(self):
        obj = ArgRegistry([ArgDef(name="a")])
        with pytest.raises(declarg.errors.InvalidFieldName):
            obj.get("b")

    def test_match_flags(self):
        obj = ArgRegistry([ArgDef(name="out_path", long="out", short="o")])
        assert(obj.match_long("out").name == "out_path")
        assert(obj.match_short("o").name == "out_path")
        assert(obj.match_long("o") is None)
        assert(obj.match_short("x") is None)

    def test_positional(self):
        obj = ArgRegistry([ArgDef(name="a"), ArgDef(name="src", positional=True, type="str")])
        assert(obj.positional.name == "src")

    def test_no_positional(self):
        assert(ArgRegistry([ArgDef(name="a")]).positional is None)

    def test_single_positional(self):
        with pytest.raises(declarg.errors.RegistryError):
            ArgRegistry([ArgDef(name="a", positional=True), ArgDef(name="b", positional=True)])

    def test_duplicate_names(self):
        with pytest.raises(declarg.errors.RegistryError):
            ArgRegistry([ArgDef(name="a"), ArgDef(name="a", long="blah")])

    def test_duplicate_flags(self):
        with pytest.raises(declarg.errors.RegistryError):
            ArgRegistry([ArgDef(name="a", short="x"), ArgDef(name="b", short="x")])

        with pytest.raises(declarg.errors.RegistryError):
            ArgRegistry([ArgDef(name="a", long="x"), ArgDef(name="b", long="x")])

    def test_invalid_definition(self):
        with pytest.raises(declarg.errors.RegistryError):
            ArgRegistry([{"name": "a", "type": "int", "default": "b"}])

    def test_read_toml(self):
        registry, config = ArgRegistry.read(TOML_TEXT)
        assert(registry.name == "Compiler")
        assert(config.value_sep == "=")
        assert(config.item_sep == ",")
        assert(registry.positional.name == "sources")
        assert(registry.get("opt_level").type_ == vt.RangedIntType(0, 3))
        assert(registry.get("opt_level").default.payload == 2)
        assert(registry.get("libraries").type_ == vt.ListType(vt.StringType()))

    def test_load_toml(self, tmp_path):
        path = tmp_path / "args.toml"
        path.write_text(TOML_TEXT)
        registry, _ = ArgRegistry.load(path)
        assert(len(registry) == 3)

    def test_build_empty(self):
        registry, config = ArgRegistry.build({})
        assert(len(registry) == 0)
        assert(config.value_sep == " ")

class TestRecordModel:

    def test_model_fields(self):
        registry = ArgRegistry([
            ArgDef(name="count", type="uint"),
            ArgDef(name="mode", type=Mode_e),
            ArgDef(name="maybe", type="optional[str]"),
            ])
        model = registry.record_model()
        assert(set(model.model_fields) == {"count", "mode", "maybe"})
        inst = model(count=2, mode=Mode_e.fast)
        assert(inst.count == 2)
        assert(inst.maybe is None)

    def test_model_validates(self):
        registry = ArgRegistry([ArgDef(name="level", type="int[0:3]")])
        with pytest.raises(ValidationError):
            registry.record_model()(level=5)

    def test_model_cached(self):
        registry = ArgRegistry([ArgDef(name="a")])
        assert(registry.record_model() is registry.record_model())
