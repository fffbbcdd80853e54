"""
bracketeer - Nested translation directives for free-form text

Resolves [[[term///context|||param]]] markup embedded in arbitrary text.
"""

from .scanner import Directive, UnclosedDirectiveError, directive_locate
from .resolver import (
    body_decompose,
    body_split,
    directive_resolve,
    substitute_make,
    text_translateAll,
)
from .lexer import BracketLexer, get_lexer
from .log import LOG, verbosity_connect

__all__ = [
    "Directive",
    "UnclosedDirectiveError",
    "directive_locate",
    "body_decompose",
    "body_split",
    "directive_resolve",
    "substitute_make",
    "text_translateAll",
    "BracketLexer",
    "get_lexer",
    "LOG",
    "verbosity_connect",
]
