# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/patterndemos/LICENSE
# ==============================================================================

"""State pattern demo.

A :class:`Context` delegates to whichever :class:`State` it currently holds.
Applying a state to a context makes that state the held one, so the context's
behavior changes by swapping a single reference.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import TextIO

from .exceptions import InvalidStateError
from .utils.output import write_line


log = logging.getLogger(__name__)


class State(ABC):
    @abstractmethod
    def do_action(self, context: Context) -> None:
        """Act on *context* and install the resulting state on it."""


class StartState(State):
    def do_action(self, context: Context) -> None:
        write_line("Player is in start state", context.stream)
        context.set_state(self)

    def __str__(self) -> str:
        return "Start State"


class StopState(State):
    def do_action(self, context: Context) -> None:
        write_line("Player is in stop state", context.stream)
        context.set_state(self)

    def __str__(self) -> str:
        return "Stop State"


class Context:
    """Holds exactly one :class:`State` at a time.

    A context built without a state starts stopped; the held reference is
    never ``None``.
    """

    def __init__(self, state: State | None = None, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._state: State = StopState()
        if state is not None:
            self.set_state(state)

    @property
    def stream(self) -> TextIO | None:
        return self._stream

    def get_state(self) -> State:
        return self._state

    def set_state(self, state: State) -> None:
        """Replace the held state.

        Raises:
            InvalidStateError: If *state* is not a :class:`State` instance.
        """
        if not isinstance(state, State):
            raise InvalidStateError(f"Expected a State, got {type(state).__name__}")
        log.debug("State change: %s -> %s", self._state, state)
        self._state = state

    @property
    def state(self) -> State:
        return self.get_state()

    @state.setter
    def state(self, state: State) -> None:
        self.set_state(state)


def main(stream: TextIO | None = None) -> None:
    context = Context(stream=stream)

    start_state = StartState()
    start_state.do_action(context)

    write_line(str(context.get_state()), stream)

    stop_state = StopState()
    stop_state.do_action(context)

    write_line(str(context.get_state()), stream)


__all__ = ["State", "StartState", "StopState", "Context", "main"]
