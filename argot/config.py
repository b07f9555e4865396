#!/usr/bin/env python3
"""
Building parsers from toml.

[program]
description = "..."
executable  = "..."

[settings.parsing]
colon_separates_values = true
trim_quotes            = false

[[cli]]
short    = "n"
long     = "num"
type     = "int"
required = true

[[cli]]
short  = "r"
long   = "recurse"
switch = true

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
from typing import (TYPE_CHECKING, Any, Final)

# ##-- end stdlib imports

# ##-- 3rd party imports
import tomlguard
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from argot import errors
from argot.arguments import Arguments
from argot.enums import ParseOptions_f

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def load_options(config:TomlGuard) -> ParseOptions_f:
    """ Read settings.parsing into parse option flags """
    parsing = config.on_fail({}).settings.parsing()
    match parsing:
        case dict() | TomlGuard():
            pass
        case x:
            raise errors.ConfigError("settings.parsing should be a table, not: %s", x)

    for key, val in parsing.items():
        if not isinstance(val, bool):
            raise errors.ConfigError("Parse option %s should be a bool, not: %s", key, val)

    return ParseOptions_f.build(dict(parsing.items()))

def build_arguments(config:TomlGuard) -> Arguments:
    """ Create a registry with the [program] table, and declare any [[cli]] entries """
    description = config.on_fail("", str).program.description()
    executable  = config.on_fail("", str).program.executable()
    specs       = config.on_fail([]).cli()
    logging.debug("Building Arguments for '%s' with %s params", executable, len(specs))

    args = Arguments(description, executable)
    args.load_specs(specs)
    return args

def read(text:str) -> tuple[Arguments, ParseOptions_f]:
    """ Build a registry and options from a toml string """
    config = tomlguard.read(text)
    return build_arguments(config), load_options(config)

def load(path:pl.Path|str) -> tuple[Arguments, ParseOptions_f]:
    """ Build a registry and options from a toml file """
    path = pl.Path(path)
    if not path.exists():
        raise errors.ConfigError("Config file does not exist: %s", path)

    logging.debug("Loading Argot Config: %s", path)
    return read(path.read_text())
