"""
Markup dialect tokens

The six fixed token strings of the directive markup. Every token is three
characters long; the scanner and the decomposition step rely on that.

    [[[term///context|||plain|||(((translatable)))]]]
"""

DIRECTIVE_OPEN = "[[["
DIRECTIVE_CLOSE = "]]]"
PARAMETER_DELIMITER = "|||"
CONTEXT_SEPARATOR = "///"
PARAMETER_OPEN = "((("
PARAMETER_CLOSE = ")))"

TOKEN_LENGTH = 3

PLACEHOLDER_PREFIX = "%"


def placeHolder_make(index: int) -> str:
    """
    Generate the placeholder a parameter at given index replaces.

    Args:
        index: Zero-based parameter index

    Returns:
        Placeholder string (e.g., "%0")

    Example:
        >>> placeHolder_make(2)
        '%2'
    """
    return f"{PLACEHOLDER_PREFIX}{index}"
