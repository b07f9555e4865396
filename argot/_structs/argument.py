#!/usr/bin/env python3
"""
Handles returned from declaring a parameter.

A handle is a reference into the registry that created it,
(the registry and a slot index),
so every read reflects the latest parse pass.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Final)

# ##-- end stdlib imports

# ##-- 1st party imports
from argot import errors

# ##-- end 1st party imports

if TYPE_CHECKING:
    from argot.arguments import Arguments
    from argot._structs.param_spec import ParamSpec
    from argot._structs.param_state import ParamState

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class Argument:
    """ A live view of one declared parameter """

    __slots__ = ("_owner", "_idx")

    def __init__(self, owner:Arguments, idx:int):
        self._owner = owner
        self._idx   = idx

    @property
    def _state(self) -> ParamState:
        return self._owner._states[self._idx]

    def _check_valid(self) -> None:
        if not self._owner.is_valid:
            raise errors.InvalidStateError("Can't read the value of '%s', the arguments are not valid", self.long)

    ##--| declaration

    @property
    def spec(self) -> ParamSpec:
        return self._owner._specs[self._idx]

    @property
    def short(self) -> str:
        return self.spec.short

    @property
    def long(self) -> str:
        return self.spec.long

    @property
    def desc(self) -> str:
        return self.spec.desc

    @property
    def type_(self) -> type:
        return self.spec.type_

    @property
    def required(self) -> bool:
        return self.spec.required

    @property
    def default(self) -> Any:
        return self.spec.default

    @default.setter
    def default(self, val:Any) -> None:
        self._owner._specs[self._idx] = self.spec.model_copy(update={"default": val})

    ##--| results

    @property
    def is_missing(self) -> bool:
        return self._state.missing

    @is_missing.setter
    def is_missing(self, val:bool) -> None:
        self._state.missing = val

    @property
    def values(self) -> list[Any]:
        self._check_valid()
        return list(self._state.values)

    @property
    def value(self) -> Any:
        """ The last matched value,
          or the default (falling back to the type's zero) when missing
        """
        self._check_valid()
        state = self._state
        match state.missing, state.values:
            case True, _ if self.spec.has_default:
                return self.spec.default
            case True, _:
                return self.spec.zero
            case False, [*_, last]:
                return last
            case False, []:
                return self.spec.zero

    def __eq__(self, other) -> bool:
        match other:
            case Argument():
                return other._owner is self._owner and other._idx == self._idx
            case _:
                return NotImplemented

    def __hash__(self):
        return hash((id(self._owner), self._idx))

    def __repr__(self):
        return f"<{type(self).__name__}: -{self.short}|-{self.long}>"

class SwitchArgument(Argument):
    """ A live view of a declared switch. value is True iff the switch was given """

    __slots__ = ()

    @property
    def value(self) -> bool:
        self._check_valid()
        return not self._state.missing
