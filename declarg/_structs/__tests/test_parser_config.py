#!/usr/bin/env python3
"""

"""
from __future__ import annotations

import logging as logmod

import pytest
logging = logmod.root

from pydantic import ValidationError
from tomlguard import TomlGuard

from declarg._structs.parser_config import ParserConfig

class TestParserConfig:

    def test_defaults(self):
        obj = ParserConfig()
        assert(obj.value_sep == " ")
        assert(obj.short_prefix == "-")
        assert(obj.long_prefix == "--")
        assert(obj.item_sep == " ")
        assert(obj.allow_index_as_enum)
        assert(not obj.zero_defaults)
        assert(obj.chaining)

    def test_build_from_dict(self):
        obj = ParserConfig.build({"value_sep": "="}, item_sep=",")
        assert(obj.value_sep == "=")
        assert(obj.item_sep == ",")

    def test_build_from_tomlguard(self):
        obj = ParserConfig.build(TomlGuard({"long_prefix": "//", "short_prefix": "/"}))
        assert(obj.long_prefix == "//")
        assert(obj.short_prefix == "/")

    def test_build_passthrough(self):
        obj = ParserConfig()
        assert(ParserConfig.build(obj) is obj)

    def test_build_with_update(self):
        obj = ParserConfig.build(ParserConfig(), value_sep="=")
        assert(obj.value_sep == "=")

    def test_same_prefixes_disable_chaining(self):
        obj = ParserConfig(short_prefix="-", long_prefix="-")
        assert(not obj.chaining)

    def test_frozen(self):
        obj = ParserConfig()
        with pytest.raises(ValidationError):
            obj.value_sep = "="

    @pytest.mark.parametrize("data", [
        {"value_sep": "=="},
        {"item_sep": "a"},
        {"short_prefix": ""},
        {"long_prefix": "-a"},
        {"unknown": True},
        ])
    def test_invalid(self, data):
        with pytest.raises(ValidationError):
            ParserConfig.build(data)
