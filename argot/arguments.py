#!/usr/bin/env python3
"""
The registry of declared parameters for a program.

Declare parameters with `add` and `add_switch`,
then `parse` a list of cli args.
The handles returned from declaration read their values
from the most recent parse.

Not thread safe. Declaring and parsing must happen from one thread,
or be serialized by the caller.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Final)

# ##-- end stdlib imports

# ##-- 1st party imports
from argot import errors
from argot._structs.argument import Argument, SwitchArgument
from argot._structs.param_spec import ParamSpec, SwitchSpec
from argot._structs.param_state import ParamState
from argot.enums import NO_DEFAULT, ParseOptions_f
from argot.parsers import ArgParser
from argot.reporters import UsagePrinter

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence
    from tomlguard import TomlGuard
    from argot.parsers import ArgParser_p
    from argot.reporters import TextSink_p, UsagePrinter_p

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class Arguments:
    """
      Owns the declared parameter specs, and their parse state, by index.
      is_valid is False until a parse runs, or it is set directly.
    """

    def __init__(self, description:str, executable:str, *, printer:None|UsagePrinter_p=None, parser:None|ArgParser_p=None):
        self.description                        = description
        self.executable                         = executable
        self.usage_printer : UsagePrinter_p     = printer or UsagePrinter(description=description, executable=executable)
        self.is_valid      : bool               = False
        self._parser       : ArgParser_p        = parser or ArgParser()
        self._specs        : list[ParamSpec]    = []
        self._states       : list[ParamState]   = []
        self._handles      : list[Argument]     = []
        self._names        : dict[str, int]     = {}
        self._errors       : list[str]          = []

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, name:str) -> bool:
        return name in self._names

    def __getitem__(self, name:str) -> Argument:
        return self._handles[self._names[name]]

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    @property
    def specs(self) -> tuple[ParamSpec, ...]:
        return tuple(self._specs)

    @property
    def params(self) -> tuple[Argument, ...]:
        return tuple(self._handles)

    ##--| declaration

    def add(self, short:str, long:str, desc:str, type_:type|str=str, required:bool=False, default:Any=NO_DEFAULT) -> Argument:
        """ Declare a valued parameter. Raises DuplicateDeclarationError on name reuse """
        spec = ParamSpec.build({
            "short"    : short,
            "long"     : long,
            "desc"     : desc,
            "type"     : type_,
            "required" : required,
            "default"  : default,
            })
        return self._register(spec)

    def add_switch(self, short:str, long:str, desc:str) -> SwitchArgument:
        """ Declare a boolean switch, True when it appears in the args """
        spec = SwitchSpec.build({
            "short" : short,
            "long"  : long,
            "desc"  : desc,
            })
        return self._register(spec)

    def add_spec(self, spec:ParamSpec) -> Argument:
        """ Declare from an already built spec """
        return self._register(spec)

    def load_specs(self, data:Iterable[TomlGuard|Mapping]) -> list[Argument]:
        """ Declare params from toml style data:
          [{short="n", long="num", type="int", required=true}, {short="r", long="recurse", switch=true}]
        """
        result = []
        for entry in data:
            entry = dict(entry.items())
            match entry.pop("switch", False):
                case True:
                    result.append(self._register(SwitchSpec.build(entry)))
                case False:
                    result.append(self._register(ParamSpec.build(entry)))
                case x:
                    raise errors.DeclarationError("Switch declarations must be a bool: %s", x)
        else:
            return result

    def _register(self, spec:ParamSpec) -> Argument:
        for name in spec.names:
            if name in self._names:
                logging.debug("Rejecting Duplicate Declaration: %s", spec)
                raise errors.DuplicateDeclarationError(name)

        idx = len(self._specs)
        self._specs.append(spec)
        self._states.append(ParamState())
        handle = SwitchArgument(self, idx) if spec.is_switch else Argument(self, idx)
        self._handles.append(handle)
        self._names[spec.short] = idx
        self._names[spec.long]  = idx
        logging.debug("Declared: %s", spec)
        return handle

    ##--| parsing

    def reset(self) -> None:
        """ Clear all results from the last parse """
        for state in self._states:
            state.reset()
        self._errors.clear()

    def parse(self, args:Sequence[str], options:ParseOptions_f=ParseOptions_f.default) -> bool:
        """
          Match args against the declared params,
          replacing any previous results.
          Returns the resulting validity.
        """
        self.reset()
        result = self._parser.parse(list(args), self._specs, options)
        for state, values in zip(self._states, result.values, strict=True):
            state.set_values(values)

        self._errors  = result.errors
        self.is_valid = result.is_valid
        logging.debug("Parse Valid: %s, Errors: %s", self.is_valid, len(self._errors))
        return self.is_valid

    ##--| presentation

    def print_usage(self, sink:TextSink_p) -> None:
        self.usage_printer.print_usage(sink, self.specs)

    def print_errors(self, sink:TextSink_p) -> None:
        self.usage_printer.print_errors(sink, self.errors)
