# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/patterndemos/LICENSE
# ==============================================================================

"""Model-View-Controller demo.

* **Model**: :class:`Student`, a record carrying a name and a roll number.
* **View**: :class:`StudentView` renders those fields as text;
  :class:`JsonStudentView` renders them as one JSON object per update.
* **Controller**: :class:`StudentController` owns the model, mutates it
  through setters and pushes the current fields to the view on demand.

The controller keeps model and view apart: neither knows about the other.
"""

from __future__ import annotations

import logging
from typing import Protocol, TextIO, runtime_checkable

import orjson
from pydantic import BaseModel

from .utils.output import write_line


log = logging.getLogger(__name__)


class Student(BaseModel):
    """Student record.

    Assignments are not validated, so the setters accept any value as-is.
    """

    name: str = ""
    roll_no: str = ""


@runtime_checkable
class View(Protocol):
    """Anything able to display a student's details."""

    def print_student_details(self, name: str, roll_no: str) -> None:  # pragma: no cover - protocol
        ...


class StudentView:
    """Writes student details as three lines of text."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def print_student_details(self, name: str, roll_no: str) -> None:
        write_line("Student: ", self._stream)
        write_line(f"Name: {name}", self._stream)
        write_line(f"Roll No: {roll_no}", self._stream)


class JsonStudentView:
    """Writes student details as a single JSON object per line."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def print_student_details(self, name: str, roll_no: str) -> None:
        write_line(orjson.dumps({"name": name, "roll_no": roll_no}).decode(), self._stream)


class StudentController:
    def __init__(self, model: Student, view: View) -> None:
        self._model = model
        self._view = view

    @property
    def model(self) -> Student:
        return self._model

    def set_student_name(self, name: str) -> None:
        log.debug("Setting student name", extra={"context": {"before": self._model.name, "after": name}})
        self._model.name = name

    def get_student_name(self) -> str:
        return self._model.name

    def set_student_roll_no(self, roll_no: str) -> None:
        log.debug("Setting student roll number", extra={"context": {"before": self._model.roll_no, "after": roll_no}})
        self._model.roll_no = roll_no

    def get_student_roll_no(self) -> str:
        return self._model.roll_no

    def update_view(self) -> None:
        """Push the model's current fields to the view."""
        log.debug("Updating view", extra={"context": self._model.model_dump()})
        self._view.print_student_details(self._model.name, self._model.roll_no)


def retrieve_student_from_database() -> Student:
    """Return the seed record the demo starts from.

    There is no database; the record is built in memory.
    """
    student = Student()
    student.name = "Robert"
    student.roll_no = "10"
    return student


def main(stream: TextIO | None = None) -> None:
    model = retrieve_student_from_database()
    view = StudentView(stream)
    controller = StudentController(model, view)

    controller.update_view()

    controller.set_student_name("John")

    controller.update_view()


__all__ = [
    "Student",
    "View",
    "StudentView",
    "JsonStudentView",
    "StudentController",
    "retrieve_student_from_database",
    "main",
]
