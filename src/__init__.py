"""
bracketeer - Nested translation directives for free-form text

Marks spans of ordinary text as translatable with [[[...]]] directives,
optionally carrying positional parameters and a disambiguation context,
and resolves them (innermost first) through a caller-supplied lookup.
"""

__version__ = "1.0.0"

from .lib import (
    Directive,
    UnclosedDirectiveError,
    directive_locate,
    directive_resolve,
    body_decompose,
    text_translateAll,
    LOG,
    verbosity_connect,
)

__all__ = [
    "Directive",
    "UnclosedDirectiveError",
    "directive_locate",
    "directive_resolve",
    "body_decompose",
    "text_translateAll",
    "LOG",
    "verbosity_connect",
    "__version__",
]
