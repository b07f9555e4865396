#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass, field
from typing import Any

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass
class ParamState:
    """ The mutable result of parsing, for one declared parameter """
    missing : bool      = True
    values  : list[Any] = field(default_factory=list)

    def reset(self) -> None:
        self.missing = True
        self.values  = []

    def set_values(self, values:list[Any]) -> None:
        self.values  = list(values)
        self.missing = not bool(self.values)
