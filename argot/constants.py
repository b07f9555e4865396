#!/usr/bin/env python3
"""
Fixed syntax and message text used across argot
"""
# Imports:
from __future__ import annotations

from typing import Final

NAME_PREFIXES      : Final[tuple[str, ...]] = ("-", "/")
VALUE_SEP          : Final[str]             = ":"
QUOTE_CHARS        : Final[tuple[str, ...]] = ('"', "'")

UNKNOWN_ARG_MSG    : Final[str]             = "unknown argument '%s'"
MISSING_ARG_MSG    : Final[str]             = "missing argument '%s'"
INVALID_VALUE_MSG  : Final[str]             = "invalid argument value for -%s: %s"

USAGE_INDENT       : Final[str]             = "  "
