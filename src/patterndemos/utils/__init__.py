# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/patterndemos/LICENSE
# ==============================================================================

"""Utility helpers for patterndemos."""

from __future__ import annotations

from .logger import get_logger, setup_logger
from .output import resolve_stream, write_line


__all__ = [
    "setup_logger",
    "get_logger",
    "resolve_stream",
    "write_line",
]
