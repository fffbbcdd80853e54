"""
Scanner for [[[directive]]] spans

Locates balanced directive spans inside a buffer of free-form text.

The scanner works in two steps:
1. Naive guess: take the first opening token and the first closing token
2. Growth: while the candidate is unbalanced, extend it to the next
   closing token and re-test

Key features:
- Nested directives are matched by growing past inner closing tokens
- Malformed or unclosed markup yields a "not found" sentinel instead of
  an error, so the caller passes the rest of the buffer through verbatim
- Each Directive remembers the buffer it was located in, so offsets are
  never compared across buffers

Example:
    >>> directive = directive_locate("The [[[quick [[[brown]]]]]] fox", 0)
    >>> directive.text
    '[[[quick [[[brown]]]]]]'
    >>> [child.text for child in directive.children]
    ['[[[brown]]]']
"""

from dataclasses import dataclass, field
from typing import Iterator, List

from ..models.tokens import (
    DIRECTIVE_OPEN,
    DIRECTIVE_CLOSE,
    PARAMETER_OPEN,
    PARAMETER_CLOSE,
    TOKEN_LENGTH,
)
from .log import LOG


class UnclosedDirectiveError(SyntaxError):
    """Raised in strict mode when a directive never becomes complete."""

    def __init__(self, buffer: str, position: int, reason: str = ""):
        context_start = max(0, position - 40)
        context_end = min(len(buffer), position + 40)
        context = buffer[context_start:context_end]
        if not reason:
            reason = f"Unclosed directive '{DIRECTIVE_OPEN}'"
        self.buffer = buffer
        self.position = position
        self.reason = reason
        super().__init__(
            f"\n{reason}\n"
            f"Position {position}\n"
            f"Context: ...{context}...\n"
            f"         {' ' * (position - context_start)}^"
        )


@dataclass(frozen=True)
class Directive:
    """
    A candidate or confirmed directive span within a buffer

    A read-only snapshot created by each scan. Top-level directives are
    located in the input text; child directives are located in their
    parent's text, so `buffer` is always the string `start` refers to.

    Attributes:
        buffer: The string this directive was located in
        start: Offset of the span within buffer
        length: Length of the span (0 means "not found")

    Example:
        For buffer "X [[[jumps]]] Y":
        Directive(start=2, length=11)
        .text  -> "[[[jumps]]]"
        .end   -> 13
    """
    buffer: str = field(repr=False)
    start: int = 0
    length: int = 0

    @classmethod
    def from_text(cls, text: str) -> "Directive":
        """Build a standalone directive spanning the whole of text."""
        return cls(buffer=text, start=0, length=len(text))

    @classmethod
    def notFound(cls, buffer: str, start: int) -> "Directive":
        """Sentinel for "no complete directive from start onward"."""
        return cls(buffer=buffer, start=start, length=0)

    @property
    def text(self) -> str:
        return self.buffer[self.start:self.start + self.length]

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def found(self) -> bool:
        return self.length > 0

    @property
    def is_complete(self) -> bool:
        """
        Opening/closing and parameter-open/close token counts balance.

        Delimiter and context tokens do not take part. A directive that was
        not found is never complete.
        """
        if not self.found:
            return False
        text = self.text
        return (
            text.count(DIRECTIVE_OPEN) == text.count(DIRECTIVE_CLOSE)
            and text.count(PARAMETER_OPEN) == text.count(PARAMETER_CLOSE)
        )

    @property
    def children(self) -> Iterator["Directive"]:
        """
        Direct nested directives, left to right

        Scans this directive's own text starting just after its opening
        token. Grandchildren are not included; query each child in turn.
        Every access starts a fresh scan.
        """
        if not self.is_complete:
            return
        text = self.text
        child = directive_locate(text, TOKEN_LENGTH)
        while child.found:
            yield child
            child = directive_locate(text, child.end)

    @property
    def child_list(self) -> List["Directive"]:
        return list(self.children)

    def __str__(self) -> str:
        if not self.found:
            return "<not found>"
        if not self.is_complete:
            return "<incomplete>" + self.text
        return self.text


def directive_locate(buffer: str, offset: int) -> Directive:
    """
    Find the next balanced directive in buffer at or after offset

    The first closing token is searched from offset, not from the opening
    token, so a stray closing token before the opening one can be picked
    up first. Such a candidate is empty and therefore incomplete, and the
    growth loop moves past it.

    Args:
        buffer: Text containing plain text and directive markup
        offset: Position to start scanning from

    Returns:
        The first complete candidate, or the not-found sentinel anchored at
        offset when no opening token exists or closing tokens run out
        before the candidate balances.

    Example:
        For buffer "a [[[b [[[c]]] d]]] e" at offset 0:
            naive guess "[[[b [[[c]]]" is unbalanced (2 opens, 1 close)
            grown guess "[[[b [[[c]]] d]]]" balances and is returned

        For buffer "a [[[b [[[c]]] d" at offset 0:
            closing tokens run out, returns the not-found sentinel
    """
    first_start = buffer.find(DIRECTIVE_OPEN, offset)
    if first_start < 0:
        return Directive.notFound(buffer, offset)

    first_ending = buffer.find(DIRECTIVE_CLOSE, offset)
    if first_ending < 0:
        return Directive.notFound(buffer, offset)

    candidate = Directive(
        buffer=buffer,
        start=first_start,
        length=max(0, first_ending + TOKEN_LENGTH - first_start),
    )
    if candidate.is_complete:
        return candidate

    # Nested opening tokens: extend to each later closing token until balanced
    previous_ending = first_ending
    while not candidate.is_complete:
        LOG(f"Candidate at {first_start} incomplete: {candidate.text!r}", level=3)
        next_ending = buffer.find(DIRECTIVE_CLOSE, previous_ending + TOKEN_LENGTH)
        if next_ending < 0:
            LOG(f"No balancing '{DIRECTIVE_CLOSE}' after offset {offset}", level=3)
            return Directive.notFound(buffer, offset)

        candidate = Directive(
            buffer=buffer,
            start=first_start,
            length=max(0, next_ending + TOKEN_LENGTH - first_start),
        )
        previous_ending = next_ending

    return candidate
