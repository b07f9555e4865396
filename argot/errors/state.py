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
"InvalidStateError",

)
# ##-- end Generated Exports

from ._base import ArgotError

class InvalidStateError(ArgotError):
    """ A parameter value was read while its registry holds no valid parse """
    general_msg = "Argot State Failure:"
    pass
