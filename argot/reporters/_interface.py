#!/usr/bin/env python3
"""

"""
# ruff: noqa: F401
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import abc
from abc import abstractmethod
from typing import (TYPE_CHECKING, Any, Protocol, runtime_checkable)

# ##-- end stdlib imports

if TYPE_CHECKING:
    from collections.abc import Iterable
    from argot._structs.param_spec import ParamSpec

@runtime_checkable
class TextSink_p(Protocol):
    """ Anything text can be written to. eg: sys.stdout, io.StringIO """

    def write(self, text:str, /) -> Any: ...

@runtime_checkable
class UsagePrinter_p(Protocol):
    """
      Renders declared parameters and parse errors to a text sink.
      Only ever given read-only views of the declarations.
    """
    description : str
    executable  : str

    @abstractmethod
    def print_usage(self, sink:TextSink_p, specs:Iterable[ParamSpec]) -> None:
        pass

    @abstractmethod
    def print_errors(self, sink:TextSink_p, errors:Iterable[str]) -> None:
        pass
