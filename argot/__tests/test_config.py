#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
from typing import (Any, Callable, ClassVar, Generic, Iterable, Iterator,
                    Mapping, Match, MutableMapping, Sequence, Tuple, TypeAlias,
                    TypeVar, cast)
##-- end imports
logging = logmod.root

import pytest
import tomlguard
from tomlguard import TomlGuard
import argot.errors
from argot import Arguments, ParseOptions_f, SwitchArgument
from argot import config

EXAMPLE_TOML = """
[program]
description = "an example program"
executable  = "example"

[settings.parsing]
colon_separates_values = true
trim_quotes            = true

[[cli]]
short    = "n"
long     = "num"
type     = "int"
required = true

[[cli]]
short   = "s"
long    = "say"
desc    = "what to say"
default = "hello"

[[cli]]
short  = "r"
long   = "recurse"
switch = true
"""

class TestParseOptionsBuild:

    def test_default(self):
        assert(ParseOptions_f.build(None) == ParseOptions_f.default)
        assert(ParseOptions_f.build([]) == ParseOptions_f.default)

    def test_str(self):
        assert(ParseOptions_f.build("trim_quotes") == ParseOptions_f.trim_quotes)

    def test_list(self):
        result = ParseOptions_f.build(["trim_quotes", "colon_separates_values"])
        assert(ParseOptions_f.trim_quotes in result)
        assert(ParseOptions_f.colon_separates_values in result)

    def test_dict(self):
        result = ParseOptions_f.build({"trim_quotes": True, "colon_separates_values": False})
        assert(result == ParseOptions_f.trim_quotes)

    def test_option_names(self):
        assert(ParseOptions_f.option_names() == ("colon_separates_values", "trim_quotes"))

    @pytest.mark.parametrize("vals", [
        "blah",
        ["trim_quotes", "blah"],
        {"blah": False},
        "default",
    ])
    def test_unknown_name_fails(self, vals):
        with pytest.raises(argot.errors.ConfigError):
            ParseOptions_f.build(vals)

    def test_bad_input_type_fails(self):
        with pytest.raises(argot.errors.ConfigError):
            ParseOptions_f.build(5)

class TestConfig:

    def test_load_options(self):
        result = config.load_options(tomlguard.read(EXAMPLE_TOML))
        assert(result == ParseOptions_f.trim_quotes | ParseOptions_f.colon_separates_values)

    def test_load_options_missing_table(self):
        result = config.load_options(TomlGuard({}))
        assert(result == ParseOptions_f.default)

    def test_load_options_unknown(self):
        data = TomlGuard({"settings": {"parsing": {"blah": True}}})
        with pytest.raises(argot.errors.ConfigError):
            config.load_options(data)

    def test_load_options_not_bool(self):
        data = TomlGuard({"settings": {"parsing": {"trim_quotes": "yes"}}})
        with pytest.raises(argot.errors.ConfigError):
            config.load_options(data)

    def test_build_arguments(self):
        args = config.build_arguments(tomlguard.read(EXAMPLE_TOML))
        assert(isinstance(args, Arguments))
        assert(args.description == "an example program")
        assert(args.executable == "example")
        assert(len(args) == 3)
        assert(isinstance(args["recurse"], SwitchArgument))
        assert(args["say"].default == "hello")

    def test_build_arguments_empty(self):
        args = config.build_arguments(TomlGuard({}))
        assert(len(args) == 0)
        assert(args.executable == "")

    def test_build_arguments_duplicate(self):
        data = TomlGuard({"cli": [{"short": "a", "long": "b"}, {"short": "a", "long": "c"}]})
        with pytest.raises(argot.errors.DuplicateDeclarationError):
            config.build_arguments(data)

    def test_read_and_parse(self):
        args, options = config.read(EXAMPLE_TOML)
        args.parse(["-n:3", "-r", "/say:'goodbye'"], options)
        assert(args.is_valid)
        assert(args["num"].value == 3)
        assert(args["r"].value is True)
        assert(args["say"].value == "goodbye")

    def test_load(self, tmp_path):
        target = tmp_path / "argot.toml"
        target.write_text(EXAMPLE_TOML)
        args, options = config.load(target)
        args.parse(["num", "5"], options)
        assert(args.is_valid)
        assert(args["s"].value == "hello")

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(argot.errors.ConfigError):
            config.load(tmp_path / "missing.toml")
