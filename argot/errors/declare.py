#!/usr/bin/env python3
"""
Errors raised while declaring parameters.
These are programming mistakes by the caller, so they are fatal.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"DeclarationError",
"DuplicateDeclarationError",

)
# ##-- end Generated Exports

from ._base import ArgotError

class DeclarationError(ArgotError):
    """ A parameter declaration could not be accepted """
    general_msg = "Argot Declaration Failure:"
    pass

class DuplicateDeclarationError(DeclarationError):
    """ A short or long name was declared twice on the same registry """
    general_msg = "Argot Duplicate Declaration:"

    def __init__(self, name:str, *args):
        super().__init__("An argument with the same name has already been declared: %s", name, *args)
        self.name = name
