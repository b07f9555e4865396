#!/usr/bin/env python3
"""
These are the core enums and flags used to convey parsing behaviour around argot.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Self)

# ##-- end stdlib imports

# ##-- 1st party imports
from argot import errors

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ParseOptions_f(enum.Flag):
    """ Options controlling how raw cli tokens are read.
      colon_separates_values : allow `-name:value` / `name:value`
      trim_quotes            : strip surrounding quote characters from values
    """
    default                = 0
    colon_separates_values = enum.auto()
    trim_quotes            = enum.auto()

    @classmethod
    def option_names(cls) -> tuple[str, ...]:
        return tuple(x for x in cls.__members__ if x != "default")

    @classmethod
    def build(cls, vals:None|str|list|dict) -> Self:
        """ Combine flags from a name, a list of names, or a dict of name -> bool.
          Raises ConfigError on any name that isn't an option.
        """
        match vals:
            case None:
                names = []
            case str():
                names = [vals]
            case list():
                names = vals
            case dict():
                names = list(vals.keys())
            case x:
                raise errors.ConfigError("Can't build parse options from: %s", x)

        unknown = [x for x in names if x not in cls.option_names()]
        if bool(unknown):
            raise errors.ConfigError("Unknown parse options: %s. Available: %s", unknown, cls.option_names())

        if isinstance(vals, dict):
            names = [x for x,y in vals.items() if bool(y)]

        base = cls.default
        for x in names:
            base |= cls[x]
        else:
            return base

class ParseFailure_e(enum.Enum):
    """ The kinds of non-fatal problem a parse pass records.
      Declaration order is the order errors are reported in.
    """
    unknown       = enum.auto()
    missing       = enum.auto()
    invalid_value = enum.auto()
    extraneous    = enum.auto()

class _Default_e(enum.Enum):
    """ Marks a declaration that was given no default value.
      An enum member, so copying a model keeps it identical.
    """
    NO_DEFAULT = enum.auto()

    def __repr__(self):
        return "NO_DEFAULT"

    def __bool__(self):
        return False

NO_DEFAULT : Final[_Default_e] = _Default_e.NO_DEFAULT
