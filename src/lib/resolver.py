"""
Resolver for [[[directive]]] markup

Turns text containing directives into fully substituted text.

Resolution is depth-first and post-order: every child directive is
resolved and spliced back into its parent's text before the parent's own
substitution runs, so a lookup never sees nested markup in a term or a
parameter.

Example:
    >>> text_translateAll("X [[[jumps]]] Y", lambda term, context: term.upper())
    'X JUMPS Y'
    >>> text_translateAll("[[[%0 %1 fox|||quick|||brown]]]")
    'quick brown fox'
"""

from functools import partial
from typing import List, Optional, Tuple

from ..config import appsettings, NESTING_DEPTH_CEILING
from ..models.body import DecomposedBody, Lookup, Parameter, Substitute
from ..models.tokens import (
    DIRECTIVE_OPEN,
    DIRECTIVE_CLOSE,
    PARAMETER_DELIMITER,
    CONTEXT_SEPARATOR,
    PARAMETER_OPEN,
    PARAMETER_CLOSE,
    TOKEN_LENGTH,
    placeHolder_make,
)
from .log import LOG
from .scanner import Directive, UnclosedDirectiveError, directive_locate


def lookup_identity(term: str, context: str) -> str:
    return term


def directive_resolve(
    directive: Directive,
    substitute: Substitute,
    depth: int = 0,
    max_depth: Optional[int] = None,
) -> str:
    """
    Recursively resolve a directive and apply substitute to it

    Literal text between children is kept unchanged; each child is
    replaced by its own resolution. The assembled string still carries
    this directive's opening and closing tokens when substitute sees it.

    Args:
        directive: A complete directive
        substitute: Transform for one assembled directive body
        depth: Nesting depth of directive (top-level is 0)
        max_depth: Depth at which directives are left as plain text
                   (defaults to appsettings.max_nesting_depth, never more
                   than NESTING_DEPTH_CEILING)

    Returns:
        The substituted text for this directive

    Example:
        For "[[[jumps [[[and leaps]]]]]]":
            child "[[[and leaps]]]" resolves first, say to "and bounds"
            substitute then receives "[[[jumps and bounds]]]"
    """
    if max_depth is None:
        max_depth = appsettings.max_nesting_depth
    max_depth = min(max_depth, NESTING_DEPTH_CEILING)
    if depth >= max_depth:
        LOG(f"Nesting depth {depth} reached, leaving {directive.text!r} as text", level=2)
        return directive.text

    text = directive.text
    parts: List[str] = []
    previous_end = 0
    for child in directive.children:
        parts.append(text[previous_end:child.start])
        parts.append(directive_resolve(child, substitute, depth + 1, max_depth))
        previous_end = child.end
    parts.append(text[previous_end:])

    return substitute("".join(parts))


def context_split(text: str) -> Tuple[str, str]:
    """Split "term///context" on the first context token."""
    term, _, context = text.partition(CONTEXT_SEPARATOR)
    return term, context


def body_split(stripped: str) -> DecomposedBody:
    """
    Split the text between a directive's outer tokens into its components

    Args:
        stripped: Directive body without its outer opening/closing tokens

    Returns:
        DecomposedBody with term, context and positional parameters

    Example:
        Input: "it///cousin"
        Output: DecomposedBody(term="it", context="cousin", parameters=[])

        Input: "%0 fox|||(((quick)))|||3"
        Output: DecomposedBody(
            term="%0 fox",
            context="",
            parameters=[Parameter("quick", "", True), Parameter("3")]
        )
    """
    if PARAMETER_DELIMITER not in stripped:
        term, context = context_split(stripped)
        return DecomposedBody(term=term, context=context)

    segments = stripped.split(PARAMETER_DELIMITER)
    term, context = context_split(segments[0])

    parameters = []
    for segment in segments[1:]:
        if PARAMETER_OPEN in segment:
            value = segment.replace(PARAMETER_OPEN, "").replace(PARAMETER_CLOSE, "")
            value, parameter_context = context_split(value)
            parameters.append(
                Parameter(value=value, context=parameter_context, translatable=True)
            )
        else:
            parameters.append(Parameter(value=segment))

    return DecomposedBody(term=term, context=context, parameters=parameters)


def body_decompose(body: str, lookup: Optional[Lookup] = None) -> str:
    """
    Translate one assembled directive body

    Strips the outer tokens, looks up the term (with its context), then
    replaces each "%N" placeholder in the result with parameter N. Marked
    parameters are looked up too; plain ones are used verbatim.

    Args:
        body: Directive text including its outer opening/closing tokens
        lookup: Translation capability (term, context) -> text; identity
                when omitted

    Returns:
        The translated text, or body unchanged if it is not wrapped in
        opening/closing tokens

    Example:
        >>> body_decompose("[[[%0 %1 fox|||(((quick)))|||brown]]]",
        ...                lambda t, c: "SPEEDY" if t == "quick" else t)
        'SPEEDY brown fox'
    """
    if lookup is None:
        lookup = lookup_identity

    if (
        len(body) < 2 * TOKEN_LENGTH
        or not body.startswith(DIRECTIVE_OPEN)
        or not body.endswith(DIRECTIVE_CLOSE)
    ):
        return body

    decomposed = body_split(body[TOKEN_LENGTH:-TOKEN_LENGTH])
    text = lookup(decomposed.term, decomposed.context)

    for index, parameter in enumerate(decomposed.parameters):
        if parameter.translatable:
            value = lookup(parameter.value, parameter.context)
        else:
            value = parameter.value
        text = text.replace(placeHolder_make(index), value)

    return text


def substitute_make(lookup: Optional[Lookup] = None) -> Substitute:
    """Bind lookup into the substitute transform directive_resolve expects."""
    return partial(body_decompose, lookup=lookup)


def text_translateAll(
    text: str,
    lookup: Optional[Lookup] = None,
    *,
    max_depth: Optional[int] = None,
    strict: Optional[bool] = None,
) -> str:
    """
    Resolve every top-level directive in text

    Plain text between directives is copied unchanged. When the scanner
    cannot find a complete directive, the rest of the text is copied
    verbatim, including any unclosed opening token.

    Args:
        text: Free-form text that may contain directive markup
        lookup: Translation capability (term, context) -> text; identity
                when omitted
        max_depth: Override for appsettings.max_nesting_depth
        strict: Override for appsettings.strict_mode; when true an
                unclosed opening token raises UnclosedDirectiveError

    Returns:
        text with all directives resolved

    Raises:
        UnclosedDirectiveError: strict mode only
        Anything raised by lookup propagates unchanged.

    Example:
        >>> text_translateAll("The [[[quick]]] [[[brown]]] fox",
        ...                   lambda t, c: t.upper())
        'The QUICK BROWN fox'
    """
    if strict is None:
        strict = appsettings.strict_mode

    directive = directive_locate(text, 0)
    if not directive.found:
        tail_check(text, 0, strict)
        return text

    substitute = substitute_make(lookup)
    parts: List[str] = []
    previous_end = 0
    count = 0
    while directive.found:
        parts.append(text[previous_end:directive.start])
        parts.append(directive_resolve(directive, substitute, 0, max_depth))
        previous_end = directive.end
        count += 1
        directive = directive_locate(text, previous_end)

    tail_check(text, previous_end, strict)
    parts.append(text[previous_end:])

    LOG(f"Resolved {count} top-level directive(s)", level=2)
    return "".join(parts)


def tail_check(text: str, offset: int, strict: bool) -> None:
    """Report an incomplete directive left in the unparsed tail."""
    position = text.find(DIRECTIVE_OPEN, offset)
    if position < 0:
        return

    tail = text[position:]
    if tail.count(DIRECTIVE_OPEN) > tail.count(DIRECTIVE_CLOSE):
        reason = f"Unclosed directive '{DIRECTIVE_OPEN}'"
    else:
        reason = f"Unbalanced parameter tokens '{PARAMETER_OPEN}'/'{PARAMETER_CLOSE}' in directive"

    if strict:
        raise UnclosedDirectiveError(text, position, reason)
    LOG(f"{reason} at {position}, passing tail through", level=2)
