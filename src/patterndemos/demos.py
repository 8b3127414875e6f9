# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/patterndemos/LICENSE
# ==============================================================================

"""Registry of the runnable demos.

Each demo module exposes ``main(stream=None)``; this module names them, keeps
them in a fixed order and runs one or all of them against a stream.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import logging
from types import MappingProxyType
import time
from typing import TextIO

from . import facade, mvc, state
from .exceptions import UnknownDemoError
from .utils.output import write_line


log = logging.getLogger(__name__)

DemoFn = Callable[[TextIO | None], None]


@dataclass(frozen=True, slots=True)
class DemoSpec:
    """A named, runnable demo."""

    name: str
    title: str
    run: DemoFn


DEMOS: Mapping[str, DemoSpec] = MappingProxyType(
    {
        spec.name: spec
        for spec in (
            DemoSpec("facade", "Facade pattern", facade.main),
            DemoSpec("mvc", "MVC pattern", mvc.main),
            DemoSpec("state", "State pattern", state.main),
        )
    }
)


def demo_names() -> tuple[str, ...]:
    return tuple(DEMOS)


def get_demo(name: str) -> DemoSpec:
    """Return the demo registered under *name*.

    Raises:
        UnknownDemoError: If no demo has that name.
    """
    try:
        return DEMOS[name]
    except KeyError:
        raise UnknownDemoError(name, demo_names()) from None


def run_demo(name: str, stream: TextIO | None = None) -> None:
    spec = get_demo(name)
    log.debug("Running demo", extra={"context": {"demo": spec.name}})
    started = time.perf_counter()
    spec.run(stream)
    log.debug(
        "Finished demo",
        extra={"context": {"demo": spec.name, "duration_ms": (time.perf_counter() - started) * 1000}},
    )


def run_all(stream: TextIO | None = None) -> None:
    """Run every registered demo in order, each under a title header."""
    for spec in DEMOS.values():
        write_line(f"== {spec.title} ==", stream)
        run_demo(spec.name, stream)


__all__ = ["DEMOS", "DemoFn", "DemoSpec", "demo_names", "get_demo", "run_demo", "run_all"]
