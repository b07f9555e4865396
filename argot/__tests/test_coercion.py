#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import datetime
import decimal
import logging as logmod
from typing import (Any, Callable, ClassVar, Generic, Iterable, Iterator,
                    Mapping, Match, MutableMapping, Sequence, Tuple, TypeAlias,
                    TypeVar, cast)
##-- end imports
logging = logmod.root

import pytest
import argot.errors
from argot import Arguments, coercion

class TestCoercion:

    @pytest.mark.parametrize("text,expected", [
        ("1", 1),
        ("-12", -12),
        ("+3", 3),
        (" 42 ", 42),
        ("007", 7),
    ])
    def test_int(self, text, expected):
        assert(coercion.coerce(int, text) == expected)

    @pytest.mark.parametrize("text", ["", "a string", "1.5", "1_000", "0x10", "١٢"])
    def test_int_fail(self, text):
        with pytest.raises(argot.errors.CoercionError):
            coercion.coerce(int, text)

    @pytest.mark.parametrize("text,expected", [
        ("true", True),
        ("True", True),
        ("FALSE", False),
        ("false", False),
    ])
    def test_bool(self, text, expected):
        assert(coercion.coerce(bool, text) is expected)

    @pytest.mark.parametrize("text", ["", "yes", "1", "0", "t"])
    def test_bool_fail(self, text):
        with pytest.raises(argot.errors.CoercionError):
            coercion.coerce(bool, text)

    @pytest.mark.parametrize("text,expected", [
        ("01/01/2001", datetime.datetime(2001, 1, 1)),
        ("12/31/1999 23:59:10", datetime.datetime(1999, 12, 31, 23, 59, 10)),
        ("2001-01-01", datetime.datetime(2001, 1, 1)),
        ("2001-01-01T10:30:00", datetime.datetime(2001, 1, 1, 10, 30)),
    ])
    def test_datetime(self, text, expected):
        assert(coercion.coerce(datetime.datetime, text) == expected)

    @pytest.mark.parametrize("text", ["false", "31/12/1999", "not a date"])
    def test_datetime_fail(self, text):
        with pytest.raises(argot.errors.CoercionError):
            coercion.coerce(datetime.datetime, text)

    def test_float(self):
        assert(coercion.coerce(float, "1.5") == 1.5)
        assert(coercion.coerce(float, "-2e3") == -2000.0)
        with pytest.raises(argot.errors.CoercionError):
            coercion.coerce(float, "nan")

    def test_str_unchanged(self):
        assert(coercion.coerce(str, " 'a string' ") == " 'a string' ")

    def test_lookup_by_name(self):
        assert(coercion.lookup("int").type_ is int)
        assert(coercion.lookup(str).name == "string")

    def test_lookup_unregistered(self):
        with pytest.raises(argot.errors.DeclarationError):
            coercion.lookup(complex)

    def test_zero_values(self):
        assert(coercion.zero_value(int) == 0)
        assert(coercion.zero_value(str) == "")
        assert(coercion.zero_value(bool) is False)
        assert(coercion.zero_value(datetime.datetime) == datetime.datetime.min)

class TestCoercionRegistration:

    @pytest.fixture(scope="function")
    def decimal_type(self):
        entry = coercion.register(decimal.Decimal, "decimal", decimal.Decimal, zero=decimal.Decimal(0))
        yield entry
        coercion._table.pop(decimal.Decimal, None)
        coercion._names.pop("decimal", None)
        coercion._names.pop("Decimal", None)

    def test_register(self, decimal_type):
        assert(coercion.is_registered(decimal.Decimal))
        assert(coercion.is_registered("decimal"))
        assert(coercion.coerce(decimal.Decimal, "1.25") == decimal.Decimal("1.25"))

    def test_register_failure_is_coercion_error(self, decimal_type):
        with pytest.raises(argot.errors.CoercionError):
            coercion.coerce(decimal.Decimal, "blah")

    def test_registered_type_parses(self, decimal_type):
        args  = Arguments("test", "test")
        param = args.add("d", "dec", "a decimal", "decimal", True)
        args.parse(["-d", "0.5"])
        assert(args.is_valid)
        assert(param.value == decimal.Decimal("0.5"))
        args.parse(["-d", "blah"])
        assert(args.errors == ["missing argument 'dec'", "invalid argument value for -d: blah"])
