#!/usr/bin/env python3
"""

"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final)

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ArgotError(Exception):
    """
      The base class for all Argot Errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg : ClassVar[str] = "Non-Specific Argot Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except (TypeError, IndexError):
            return str(self.args)
