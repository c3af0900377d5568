import logging

# Core types
from .Types import Ok, Err, Result, Some, Nothing, Optional, Null, NULL, UnwrapError
from .Types import ok, err, some, none, null
from .Union import Union, union
from .Stream import Stream

# Combinator engine
from .Parser import Parser, Range, ParseResult

# Primitives
from .Prim import empty, eol, char, any, any_char, lit, is_a

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Ok", "Err", "Result", "Some", "Nothing", "Optional", "Null", "NULL", "UnwrapError",
    "ok", "err", "some", "none", "null",
    "Union", "union", "Stream",
    "Parser", "Range", "ParseResult",
    "empty", "eol", "char", "any_char", "lit", "is_a",
]
