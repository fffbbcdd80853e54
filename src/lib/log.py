"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the active verbosity
level without requiring it to be passed through every scanner and resolver
call.

Features:
- Context-aware verbosity held in a contextvar (safe for concurrent callers)
- Falls back to appsettings.verbosity when no level is connected
- Rich formatting with timestamps, colors, and metadata

Usage:
    from bracketeer.lib.log import LOG, verbosity_connect

    # At the start of a unit of work:
    verbosity_connect(2)

    # Anywhere in that context:
    LOG("This message appears if verbosity >= 1", level=1)
    LOG("Resolution details appear if verbosity >= 2", level=2)
    LOG("Scanner trace appears if verbosity >= 3", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

from ..config import appsettings

# Context variable to hold the current verbosity override
_verbosity: ContextVar[Optional[int]] = ContextVar('verbosity', default=None)

# Configure loguru with bracketeer-specific format
logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def verbosity_connect(level: Optional[int]) -> None:
    """
    Set the verbosity for LOG() calls made in the current context.

    Args:
        level: Verbosity level, or None to fall back to appsettings.verbosity

    Example:
        verbosity_connect(3)
        text_translateAll(source, lookup)   # scanner trace is logged
    """
    _verbosity.set(level)


def verbosity_current() -> int:
    """Return the verbosity in effect for the current context."""
    level = _verbosity.get()
    if level is None:
        return appsettings.verbosity
    return level


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the current verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru metadata

    Example:
        LOG("Resolved 3 top-level directives", level=2)
        LOG("Candidate [[[a [[[b]]] incomplete, growing", level=3)
    """
    if verbosity_current() >= level:
        logger.opt(depth=1).debug(message, **kwargs)
