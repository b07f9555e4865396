#!/usr/bin/env python3
"""
The conversion table from raw cli strings to typed values.

Each supported type is registered once, with a display name,
a conversion function, and the zero value used when a parameter
is missing and has no default.
Conversion functions raise ValueError (or TypeError, ArithmeticError) on bad input,
which `coerce` converts into an argot.errors.CoercionError.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import datetime
import logging as logmod
import re
from dataclasses import dataclass, field
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final)

# ##-- end stdlib imports

# ##-- 1st party imports
from argot import errors

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

INT_RE        : Final[re.Pattern] = re.compile(r"[+-]?[0-9]+")
FLOAT_RE      : Final[re.Pattern] = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
DATE_FORMATS  : Final[tuple[str, ...]] = ("%m/%d/%Y", "%m/%d/%Y %H:%M", "%m/%d/%Y %H:%M:%S")
BOOL_LITERALS : Final[dict[str, bool]] = {"true": True, "false": False}

@dataclass(frozen=True)
class Coercion:
    """ How to turn a raw string into one type """
    type_   : type
    name    : str
    convert : Callable[[str], Any]
    zero    : Any                  = None
    aliases : tuple[str, ...]      = field(default=())

##--| conversions

def _to_str(text:str) -> str:
    return text

def _to_int(text:str) -> int:
    stripped = text.strip()
    if not INT_RE.fullmatch(stripped):
        raise ValueError("Not a base-10 integer", text)
    return int(stripped, 10)

def _to_float(text:str) -> float:
    stripped = text.strip()
    if not FLOAT_RE.fullmatch(stripped):
        raise ValueError("Not a decimal number", text)
    return float(stripped)

def _to_bool(text:str) -> bool:
    try:
        return BOOL_LITERALS[text.strip().lower()]
    except KeyError:
        raise ValueError("Not a boolean literal", text) from None

def _to_datetime(text:str) -> datetime.datetime:
    stripped = text.strip()
    try:
        return datetime.datetime.fromisoformat(stripped)
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.datetime.strptime(stripped, fmt)
        except ValueError:
            continue

    raise ValueError("Not a recognised date", text)

##--| table

_table   : dict[type, Coercion] = {}
_names   : dict[str, type]      = {}

def register(type_:type, name:str, convert:Callable[[str], Any], *, zero:Any=None, aliases:tuple[str, ...]=()) -> Coercion:
    """ Add or replace the conversion for a type.
      `name` is what usage text shows, and any of name, aliases,
      or type_.__name__ can be used to refer to the type from toml.
    """
    entry = Coercion(type_=type_, name=name, convert=convert, zero=zero, aliases=aliases)
    _table[type_] = entry
    for key in {name, type_.__name__, *aliases}:
        _names[key] = type_

    logging.debug("Registered Coercion: %s -> %s", type_, name)
    return entry

def lookup(type_:type|str) -> Coercion:
    """ Get the registered conversion for a type, or a type name """
    match type_:
        case str() if type_ in _names:
            return _table[_names[type_]]
        case type() if type_ in _table:
            return _table[type_]
        case _:
            raise errors.DeclarationError("No Coercion registered for type: %s", type_)

def resolve_type(type_:type|str) -> type:
    return lookup(type_).type_

def is_registered(type_:type|str) -> bool:
    match type_:
        case str():
            return type_ in _names
        case type():
            return type_ in _table
        case _:
            return False

def coerce(type_:type, text:str) -> Any:
    """ Convert `text` to `type_`, raising CoercionError on failure """
    entry = lookup(type_)
    try:
        return entry.convert(text)
    except (ValueError, TypeError, ArithmeticError) as err:
        raise errors.CoercionError("Failed to coerce '%s' to %s", text, entry.name) from err

def zero_value(type_:type) -> Any:
    return lookup(type_).zero

register(str,               "string",   _to_str,      zero="",                    aliases=("str",))
register(int,               "int",      _to_int,      zero=0,                     aliases=("integer",))
register(float,             "float",    _to_float,    zero=0.0,                   aliases=("double",))
register(bool,              "bool",     _to_bool,     zero=False,                 aliases=("boolean",))
register(datetime.datetime, "datetime", _to_datetime, zero=datetime.datetime.min, aliases=("date",))
