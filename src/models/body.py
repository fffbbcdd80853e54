"""
Decomposition data models

Type-safe structures for splitting a directive body into its main term,
context and positional parameters.
"""

from dataclasses import dataclass, field
from typing import Callable, List

# (term, context) -> translated text, supplied by the host application
Lookup = Callable[[str, str], str]

# assembled directive body (tokens still present) -> replacement text
Substitute = Callable[[str], str]


@dataclass(frozen=True)
class Parameter:
    """
    One positional parameter of a directive body

    Attributes:
        value: Parameter text with any parameter-open/close tokens removed
        context: Disambiguation context (translatable parameters only)
        translatable: True when the parameter was marked with (((...)))

    Example:
        For segment "(((quick///adjective)))":
        Parameter(value="quick", context="adjective", translatable=True)

        For segment "brown":
        Parameter(value="brown", context="", translatable=False)
    """
    value: str
    context: str = ""
    translatable: bool = False


@dataclass(frozen=True)
class DecomposedBody:
    """
    A directive body split into its components

    Returned by body_split() for the text between a directive's outer
    opening and closing tokens.

    Attributes:
        term: Main term passed to the lookup
        context: Disambiguation context for the term ("" when absent)
        parameters: Positional parameters, index N replaces "%N"

    Example:
        Input: "%0 %1 fox///animals|||(((quick)))|||brown"
        Result: DecomposedBody(
            term="%0 %1 fox",
            context="animals",
            parameters=[
                Parameter(value="quick", translatable=True),
                Parameter(value="brown"),
            ]
        )
    """
    term: str
    context: str = ""
    parameters: List[Parameter] = field(default_factory=list)
