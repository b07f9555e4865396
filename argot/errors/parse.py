#!/usr/bin/env python3
"""

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
"CoercionError",
"ConfigError",

)
# ##-- end Generated Exports

from ._base import ArgotError

class CoercionError(ArgotError):
    """ A raw cli string could not be converted to its declared type.
      Caught by the parser and recorded, never escapes a parse pass.
    """
    general_msg = "Argot Coercion Failure:"
    pass

class ConfigError(ArgotError):
    """ Toml configuration for argot was malformed """
    general_msg = "Argot Config Failure:"
    pass
