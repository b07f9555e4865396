#!/usr/bin/env python3
"""

"""
# ruff: noqa: F401
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import abc
from abc import abstractmethod
from dataclasses import dataclass, field
from typing import (TYPE_CHECKING, Any, Final, Protocol, runtime_checkable)

# ##-- end stdlib imports

# ##-- 1st party imports
from argot.enums import ParseFailure_e, ParseOptions_f

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Sequence
    from argot._structs.param_spec import ParamSpec

@dataclass(frozen=True)
class ParseIssue:
    """ One non-fatal problem found in a parse pass """
    kind : ParseFailure_e
    msg  : str

    def __str__(self):
        return self.msg

@dataclass
class ParseResult:
    """ What a parse pass produced.
      `values` is indexed like the specs passed to the parser.
    """
    values : list[list[Any]]  = field(default_factory=list)
    issues : list[ParseIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[str]:
        """ issue messages, ordered by kind, then by encounter """
        ordered = sorted(self.issues, key=lambda x: x.kind.value)
        return [str(x) for x in ordered]

    @property
    def is_valid(self) -> bool:
        return not bool(self.issues)

@runtime_checkable
class ArgParser_p(Protocol):
    """
    A Single standard process point for turning the list of passed in args,
    into values for a sequence of parameter specs
    """

    @abstractmethod
    def parse(self, args:Sequence[str], specs:Sequence[ParamSpec], options:ParseOptions_f=ParseOptions_f.default) -> ParseResult:
        pass
