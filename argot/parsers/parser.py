#!/usr/bin/env python3
"""
The left-to-right token scan that matches cli args against parameter specs.

handles:
  ["-name", "val"], ["/name", "val"], ["name", "val"],
  ["-name:val"]     (with colon_separates_values),
  ["-switch"],
  repeated names, each adding another value.

A bare token is only a name if it exactly matches a declared name,
otherwise it is leftover input.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Final)

# ##-- end stdlib imports

# ##-- 3rd party imports
import more_itertools as mitz

# ##-- end 3rd party imports

# ##-- 1st party imports
from argot import coercion, errors
from argot.constants import (INVALID_VALUE_MSG, MISSING_ARG_MSG, NAME_PREFIXES,
                             QUOTE_CHARS, UNKNOWN_ARG_MSG, VALUE_SEP)
from argot.enums import ParseFailure_e, ParseOptions_f
from ._interface import ArgParser_p, ParseIssue, ParseResult

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Sequence
    from argot._structs.param_spec import ParamSpec

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ArgParser(ArgParser_p):
    """
      Runs a single pass over args.
      Never raises for bad user input, every problem is recorded
      as a ParseIssue and the scan continues to the end.
    """

    def __init__(self):
        self._lookup  : dict[str, int]  = {}
        self._specs   : Sequence[ParamSpec] = ()
        self._options : ParseOptions_f  = ParseOptions_f.default
        self._result  : ParseResult     = ParseResult()

    def parse(self, args:Sequence[str], specs:Sequence[ParamSpec], options:ParseOptions_f=ParseOptions_f.default) -> ParseResult:
        logging.debug("Parsing args: %s (%s)", args, options)
        self._specs   = specs
        self._options = options
        self._lookup  = self._build_lookup(specs)
        self._result  = ParseResult(values=[[] for _ in specs])

        source = mitz.peekable(args)
        for token in source:
            self._process_token(token, source)

        self._check_required()
        logging.debug("Parse produced %s issues", len(self._result.issues))
        return self._result

    def _build_lookup(self, specs:Sequence[ParamSpec]) -> dict[str, int]:
        lookup = {}
        for idx, spec in enumerate(specs):
            for name in spec.names:
                lookup.setdefault(name, idx)
        else:
            return lookup

    def _record(self, kind:ParseFailure_e, fmt:str, *args) -> None:
        msg = fmt % args
        logging.debug("Parse Issue (%s): %s", kind.name, msg)
        self._result.issues.append(ParseIssue(kind, msg))

    def _split_token(self, token:str) -> tuple[bool, str, None|str]:
        """ returns (prefixed, name, inline value) """
        prefixed = token.startswith(NAME_PREFIXES)
        name     = token[1:] if prefixed else token
        inline   = None
        if ParseOptions_f.colon_separates_values in self._options and VALUE_SEP in name:
            name, inline = name.split(VALUE_SEP, 1)

        return prefixed, name, inline

    def _is_name_candidate(self, token:str) -> bool:
        """ would this token be read as a parameter name, rather than a value """
        prefixed, name, _ = self._split_token(token)
        return prefixed or name in self._lookup

    def _process_token(self, token:str, source:mitz.peekable) -> None:
        prefixed, name, inline = self._split_token(token)
        match self._lookup.get(name, None):
            case None if not prefixed:
                self._record(ParseFailure_e.extraneous, UNKNOWN_ARG_MSG, token)
            case None:
                self._record(ParseFailure_e.unknown, UNKNOWN_ARG_MSG, name)
                following = source.peek(None)
                if inline is None and following is not None and not self._is_name_candidate(following):
                    # The unknown name's value goes with it
                    next(source)
            case int() as idx if self._specs[idx].is_switch:
                logging.debug("Matched Switch: %s", self._specs[idx].long)
                self._result.values[idx].append(True)
            case int() as idx if inline is not None:
                self._add_value(idx, inline)
            case int() as idx:
                self._add_value(idx, next(source, None))

    def _add_value(self, idx:int, raw:None|str) -> None:
        spec = self._specs[idx]
        if raw is None:
            logging.debug("No value available for: %s", spec.long)
            self._record(ParseFailure_e.invalid_value, INVALID_VALUE_MSG, spec.short, "")
            return

        text = self._trim_quotes(raw)
        try:
            value = coercion.coerce(spec.type_, text)
        except errors.CoercionError as err:
            logging.debug("%s", err)
            self._record(ParseFailure_e.invalid_value, INVALID_VALUE_MSG, spec.short, raw)
        else:
            logging.debug("Matched Param: %s = %r", spec.long, value)
            self._result.values[idx].append(value)

    def _trim_quotes(self, text:str) -> str:
        if ParseOptions_f.trim_quotes not in self._options:
            return text

        match text:
            case str() if len(text) > 1 and text[0] in QUOTE_CHARS and text[-1] == text[0]:
                return text[1:-1]
            case str() if text.startswith(QUOTE_CHARS):
                return text[1:]
            case _:
                return text

    def _check_required(self) -> None:
        for spec, values in zip(self._specs, self._result.values, strict=True):
            if spec.required and not bool(values):
                self._record(ParseFailure_e.missing, MISSING_ARG_MSG, spec.long)
