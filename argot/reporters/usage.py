#!/usr/bin/env python3
"""
The default usage text for a set of parameters:

  {exe} - {description}

  usage: {exe} [-optional <type>] -required <type>

    s,long - type; required.  {desc}
    o,optional - type; optional, default {default}.  {desc}

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Final)

# ##-- end stdlib imports

# ##-- 1st party imports
from argot.constants import USAGE_INDENT
from ._interface import TextSink_p, UsagePrinter_p

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Iterable
    from argot._structs.param_spec import ParamSpec

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

LINE_SEP : Final[str] = "\n"

class UsagePrinter(UsagePrinter_p):

    def __init__(self, description:str="", executable:str=""):
        self.description = description
        self.executable  = executable

    def print_usage(self, sink:TextSink_p, specs:Iterable[ParamSpec]) -> None:
        specs  = list(specs)
        logging.debug("Printing usage for %s params", len(specs))
        result = [
            self._header(),
            "",
            self._summary(specs),
            "",
            *(self._param_line(x) for x in specs),
            "",
        ]
        sink.write(LINE_SEP.join(result))

    def print_errors(self, sink:TextSink_p, errors:Iterable[str]) -> None:
        for err in errors:
            sink.write(f"{err}{LINE_SEP}")

    def _header(self) -> str:
        return f"{self.executable} - {self.description}"

    def _summary(self, specs:list[ParamSpec]) -> str:
        parts = [f"usage: {self.executable} "]
        for spec in specs:
            match spec:
                case _ if spec.is_switch:
                    parts.append(f"[{spec.key_str}] ")
                case _ if spec.required:
                    parts.append(f"{spec.key_str} <{spec.type_name}> ")
                case _:
                    parts.append(f"[{spec.key_str} <{spec.type_name}>] ")
        else:
            return "".join(parts)

    def _param_line(self, spec:ParamSpec) -> str:
        type_name = "switch" if spec.is_switch else spec.type_name
        match spec.required, spec.has_default:
            case True, _:
                presence = "required"
            case False, True if not spec.is_switch:
                presence = f"optional, default {spec.default}"
            case False, _:
                presence = "optional"

        return f"{USAGE_INDENT}{spec.short},{spec.long} - {type_name}; {presence}.  {spec.desc}"
