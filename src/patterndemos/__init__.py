# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/patterndemos/LICENSE
# ==============================================================================

"""Facade, MVC and State design pattern demos."""

from __future__ import annotations

from .demos import DEMOS, DemoSpec, get_demo, run_all, run_demo
from .exceptions import InvalidStateError, PatternDemoError, UnknownDemoError, UnknownShapeError
from .facade import Circle, Rectangle, Shape, ShapeMaker, Square
from .mvc import JsonStudentView, Student, StudentController, StudentView, View
from .state import Context, StartState, State, StopState


__all__ = [
    "DEMOS",
    "DemoSpec",
    "get_demo",
    "run_demo",
    "run_all",
    "PatternDemoError",
    "UnknownDemoError",
    "UnknownShapeError",
    "InvalidStateError",
    "Shape",
    "Circle",
    "Rectangle",
    "Square",
    "ShapeMaker",
    "Student",
    "View",
    "StudentView",
    "JsonStudentView",
    "StudentController",
    "State",
    "StartState",
    "StopState",
    "Context",
]
