#!/usr/bin/env python3
"""
These are the argot specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._base import ArgotError
from .declare import DeclarationError, DuplicateDeclarationError
from .parse import CoercionError, ConfigError
from .state import InvalidStateError

# ##-- end 1st party imports
