# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/patterndemos/LICENSE
# ==============================================================================

"""Facade pattern demo.

:class:`ShapeMaker` is the facade: callers ask it to draw a circle, a
rectangle or a square and never touch the :class:`Shape` implementations it
builds and owns.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import ClassVar, TextIO

from .exceptions import UnknownShapeError
from .utils.output import write_line


log = logging.getLogger(__name__)


class Shape(ABC):
    """A drawable shape with a single no-argument operation."""

    name: ClassVar[str]

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @abstractmethod
    def draw(self) -> None:
        """Write this shape's line to the output stream."""

    def _emit(self) -> None:
        write_line(f"{type(self).__name__}::draw()", self._stream)


class Circle(Shape):
    name = "circle"

    def draw(self) -> None:
        self._emit()


class Rectangle(Shape):
    name = "rectangle"

    def draw(self) -> None:
        self._emit()


class Square(Shape):
    name = "square"

    def draw(self) -> None:
        self._emit()


class ShapeMaker:
    """Facade over the three concrete shapes.

    Each shape is constructed once, up front, and reused for every call, so
    drawing is idempotent: no call changes what a later call prints.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._circle = Circle(stream)
        self._rectangle = Rectangle(stream)
        self._square = Square(stream)
        self._shapes: dict[str, Shape] = {
            shape.name: shape for shape in (self._circle, self._rectangle, self._square)
        }

    @property
    def shape_names(self) -> tuple[str, ...]:
        return tuple(self._shapes)

    def draw_circle(self) -> None:
        self._delegate(self._circle)

    def draw_rectangle(self) -> None:
        self._delegate(self._rectangle)

    def draw_square(self) -> None:
        self._delegate(self._square)

    def draw(self, name: str) -> None:
        """Draw the shape registered under *name*.

        Raises:
            UnknownShapeError: If the facade owns no shape called *name*.
        """
        try:
            shape = self._shapes[name]
        except KeyError:
            raise UnknownShapeError(name) from None
        self._delegate(shape)

    def _delegate(self, shape: Shape) -> None:
        log.debug("Delegating draw to %s", type(shape).__name__, extra={"context": {"shape": shape.name}})
        shape.draw()


def main(stream: TextIO | None = None) -> None:
    shape_maker = ShapeMaker(stream)

    shape_maker.draw_circle()
    shape_maker.draw_rectangle()
    shape_maker.draw_square()


__all__ = ["Shape", "Circle", "Rectangle", "Square", "ShapeMaker", "main"]
