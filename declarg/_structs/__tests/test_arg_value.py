#!/usr/bin/env python3
"""

"""
from __future__ import annotations

import logging as logmod

import pytest
logging = logmod.root

import declarg.errors
from declarg._interface import ValueKind_e
from declarg._structs.arg_value import ArgValue, value_matches_type
from declarg._structs import value_type as vt

class TestArgValueTypeMatch:

    def test_exact_variant(self):
        assert(value_matches_type(ArgValue.int_(2), vt.IntType()))
        assert(not value_matches_type(ArgValue.int_(2), vt.UintType()))
        assert(not value_matches_type(ArgValue.string("a"), vt.CharType()))

    def test_ranged_checks_current_bounds(self):
        val = ArgValue.ranged(5)
        assert(not val.of_type(vt.RangedIntType(0, 3)))
        assert(val.of_type(vt.RangedIntType(0, 5)))

    def test_enum_index_in_range(self):
        type_ = vt.EnumType(("a", "b"))
        assert(ArgValue.enum(1).of_type(type_))
        assert(not ArgValue.enum(2).of_type(type_))

    def test_list_elements_checked(self):
        type_ = vt.ListType(vt.IntType())
        assert(ArgValue.list_([ArgValue.int_(1)]).of_type(type_))
        assert(not ArgValue.list_([ArgValue.string("a")]).of_type(type_))
        assert(ArgValue.list_([]).of_type(type_))

    def test_optional(self):
        type_ = vt.OptionalType(vt.StringType())
        assert(ArgValue.optional().of_type(type_))
        assert(ArgValue.optional(ArgValue.string("a")).of_type(type_))
        assert(not ArgValue.optional(ArgValue.int_(1)).of_type(type_))

class TestArgValueFromPython:

    def test_scalars(self):
        assert(ArgValue.from_python(vt.BoolType(), True) == ArgValue.bool_(True))
        assert(ArgValue.from_python(vt.UintType(), 5) == ArgValue.uint(5))
        assert(ArgValue.from_python(vt.FloatType(), 2) == ArgValue.float_(2.0))

    def test_bool_is_not_int(self):
        with pytest.raises(ValueError):
            ArgValue.from_python(vt.IntType(), True)

    def test_negative_uint_fails(self):
        with pytest.raises(ValueError):
            ArgValue.from_python(vt.UintType(), -1)

    def test_ranged(self):
        assert(ArgValue.from_python(vt.RangedIntType(0, 3), 3).payload == 3)
        with pytest.raises(ValueError):
            ArgValue.from_python(vt.RangedIntType(0, 3), 4)

    def test_nested_list(self):
        type_ = vt.ListType(vt.OptionalType(vt.IntType()))
        val   = ArgValue.from_python(type_, [1, None])
        assert(val.of_type(type_))
        assert(val.to_python() == [1, None])

    def test_failed_list_disposes_built(self, mocker):
        spy = mocker.spy(ArgValue, "dispose")
        with pytest.raises(ValueError):
            ArgValue.from_python(vt.ListType(vt.IntType()), [1, 2, "c"])
        assert(spy.call_count == 2)

    def test_enum_by_name(self):
        assert(ArgValue.from_python(vt.EnumType(("a", "b")), "B").payload == 1)

    def test_passthrough(self):
        val = ArgValue.string("a")
        assert(ArgValue.from_python(vt.StringType(), val) is val)

    def test_wrong_argvalue(self):
        with pytest.raises(ValueError):
            ArgValue.from_python(vt.StringType(), ArgValue.int_(1))

class TestArgValueDisposal:

    def test_dispose(self):
        val = ArgValue.string("blah")
        val.dispose()
        assert(val.disposed)
        with pytest.raises(declarg.errors.DisposedValueError):
            val.payload

    def test_dispose_twice(self):
        val = ArgValue.list_([ArgValue.string("a")])
        val.dispose()
        val.dispose()
        assert(val.disposed)

    def test_list_releases_each_element_once(self, mocker):
        elems = [ArgValue.string(x) for x in "abc"]
        val   = ArgValue.list_(elems)
        spy   = mocker.spy(ArgValue, "_release")
        val.dispose()
        val.dispose()
        for elem in elems:
            elem.dispose()

        assert(spy.call_count == 4)
        assert(all(x.disposed for x in elems))

    def test_optional_releases_inner(self):
        inner = ArgValue.string("a")
        val   = ArgValue.optional(inner)
        val.dispose()
        assert(inner.disposed)

    def test_context_manager(self):
        with ArgValue.list_([ArgValue.int_(1)]) as val:
            assert(val.payload[0].payload == 1)

        assert(val.disposed)

    def test_context_manager_on_error(self):
        val = ArgValue.string("a")
        with pytest.raises(KeyError):
            with val:
                raise KeyError("blah")

        assert(val.disposed)

    def test_disposed_matches_nothing(self):
        val = ArgValue.int_(1)
        val.dispose()
        assert(not val.of_type(vt.IntType()))
