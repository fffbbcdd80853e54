"""
Models package for bracketeer

Contains the markup tokens and the data structures produced while
decomposing a directive body.
"""

from .tokens import (
    DIRECTIVE_OPEN,
    DIRECTIVE_CLOSE,
    PARAMETER_DELIMITER,
    CONTEXT_SEPARATOR,
    PARAMETER_OPEN,
    PARAMETER_CLOSE,
    TOKEN_LENGTH,
    placeHolder_make,
)
from .body import Parameter, DecomposedBody, Lookup, Substitute

__all__ = [
    "DIRECTIVE_OPEN",
    "DIRECTIVE_CLOSE",
    "PARAMETER_DELIMITER",
    "CONTEXT_SEPARATOR",
    "PARAMETER_OPEN",
    "PARAMETER_CLOSE",
    "TOKEN_LENGTH",
    "placeHolder_make",
    "Parameter",
    "DecomposedBody",
    "Lookup",
    "Substitute",
]
