# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/patterndemos/LICENSE
# ==============================================================================

"""Exceptions raised by patterndemos.

The demos themselves cannot fail; these cover the lookup and wiring seams
around them. Each concrete error also derives from the matching builtin so
callers can catch ``LookupError``/``TypeError`` without importing this module.
"""

from __future__ import annotations


class PatternDemoError(Exception):
    """Base class for all patterndemos errors."""


class UnknownDemoError(PatternDemoError, LookupError):
    """Raised when a demo name is not registered."""

    def __init__(self, name: str, available: tuple[str, ...] = ()) -> None:
        self.name = name
        self.available = available
        message = f"Unknown demo: {name!r}"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message)


class UnknownShapeError(PatternDemoError, LookupError):
    """Raised when ``ShapeMaker.draw`` is asked for a shape it does not own."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown shape: {name!r}")


class InvalidStateError(PatternDemoError, TypeError):
    """Raised when a context is handed something that is not a ``State``."""


__all__ = [
    "PatternDemoError",
    "UnknownDemoError",
    "UnknownShapeError",
    "InvalidStateError",
]
