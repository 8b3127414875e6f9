# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/patterndemos/LICENSE
# ==============================================================================

"""Console output helpers shared by the demos."""

from __future__ import annotations

import sys
from typing import TextIO


def resolve_stream(stream: TextIO | None = None) -> TextIO:
    """Return *stream*, or the current ``sys.stdout`` when it is ``None``.

    ``sys.stdout`` is looked up on every call rather than bound at import time
    so redirected or captured output is honoured.
    """
    return stream if stream is not None else sys.stdout


def write_line(line: str, stream: TextIO | None = None) -> None:
    print(line, file=resolve_stream(stream))


__all__ = ["resolve_stream", "write_line"]
