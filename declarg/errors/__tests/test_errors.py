#!/usr/bin/env python3
"""

"""
from __future__ import annotations

import logging as logmod

import pytest
logging = logmod.root

import declarg.errors
from declarg.errors import (CoercionContractError, DeclargError,
                            DisposedValueError, InvalidFieldName,
                            InvalidValue, MissingArgs, ParseError,
                            UnclosedDelimiter)

class TestErrorHierarchy:

    def test_base(self):
        for err in [InvalidValue, UnclosedDelimiter, MissingArgs, InvalidFieldName,
                    CoercionContractError, DisposedValueError]:
            assert(issubclass(err, DeclargError))

    def test_parse_errors(self):
        for err in [InvalidValue, UnclosedDelimiter, MissingArgs]:
            assert(issubclass(err, ParseError))

    def test_contract_errors_are_not_parse_errors(self):
        assert(not issubclass(CoercionContractError, ParseError))
        assert(not issubclass(DisposedValueError, ParseError))

class TestErrorMessages:

    def test_format(self):
        err = DeclargError("Bad %s: %s", "thing", 2)
        assert(str(err) == "Bad thing: 2")

    def test_format_mismatch(self):
        err = DeclargError("No placeholders", "extra")
        assert(str(err) == str(("No placeholders", "extra")))

    def test_parse_error_context(self):
        err = InvalidValue("Not an int: %s", "x", raw="x")
        assert(str(err) == "Not an int: x (input: 'x')")
        err.with_context(field="count", raw="ignored")
        assert(err.field == "count")
        assert(err.raw == "x")
        assert(str(err) == "Not an int: x (field: count, input: 'x')")

    def test_context_kept(self):
        err = InvalidValue("blah", field="inner")
        err.with_context(field="outer")
        assert(err.field == "inner")

    def test_missing_args(self):
        err = MissingArgs("Missing required argument: %s", "a", field="a", missing=["a", "b"])
        assert(err.missing == ["a", "b"])
        assert(isinstance(err, declarg.errors.ParseError))
