#!/usr/bin/env python3
"""
Argot : Declare, parse, and validate typed command line arguments.

"""
# Imports:
from __future__ import annotations

import logging as logmod

from .enums import NO_DEFAULT, ParseFailure_e, ParseOptions_f
from ._structs.param_spec import ParamSpec, SwitchSpec
from ._structs.argument import Argument, SwitchArgument
from .arguments import Arguments
from .reporters import UsagePrinter

__version__ = "0.1.0"

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging
