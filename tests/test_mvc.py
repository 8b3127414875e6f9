# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/patterndemos/LICENSE
# ==============================================================================

from __future__ import annotations

import io
import json

import pytest

from patterndemos.mvc import (
    JsonStudentView,
    Student,
    StudentController,
    StudentView,
    View,
    main,
    retrieve_student_from_database,
)


class RecordingView:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def print_student_details(self, name: str, roll_no: str) -> None:
        self.calls.append((name, roll_no))


def test_update_view_reflects_seed_record() -> None:
    stream = io.StringIO()
    controller = StudentController(retrieve_student_from_database(), StudentView(stream))

    controller.update_view()

    assert stream.getvalue().splitlines() == ["Student: ", "Name: Robert", "Roll No: 10"]


def test_set_name_then_update_keeps_roll_number() -> None:
    view = RecordingView()
    controller = StudentController(Student(name="Robert", roll_no="10"), view)

    controller.update_view()
    controller.set_student_name("John")
    controller.update_view()

    assert view.calls == [("Robert", "10"), ("John", "10")]
    assert controller.get_student_name() == "John"
    assert controller.get_student_roll_no() == "10"


def test_setters_write_through_to_model() -> None:
    model = Student(name="Robert", roll_no="10")
    controller = StudentController(model, RecordingView())

    controller.set_student_roll_no("42")

    assert model.roll_no == "42"
    assert controller.model is model


def test_setter_accepts_any_string() -> None:
    controller = StudentController(Student(), RecordingView())

    controller.set_student_name("")
    assert controller.get_student_name() == ""

    controller.set_student_name("  Ada Lovelace \n")
    assert controller.get_student_name() == "  Ada Lovelace \n"


def test_student_equality_is_by_fields() -> None:
    assert Student(name="Robert", roll_no="10") == retrieve_student_from_database()
    assert Student(name="John", roll_no="10") != retrieve_student_from_database()


def test_json_view_writes_one_object_per_update() -> None:
    stream = io.StringIO()
    controller = StudentController(Student(name="Robert", roll_no="10"), JsonStudentView(stream))

    controller.update_view()
    controller.set_student_name("John")
    controller.update_view()

    lines = stream.getvalue().splitlines()
    assert [json.loads(line) for line in lines] == [
        {"name": "Robert", "roll_no": "10"},
        {"name": "John", "roll_no": "10"},
    ]


def test_views_satisfy_protocol() -> None:
    assert isinstance(StudentView(), View)
    assert isinstance(JsonStudentView(), View)
    assert isinstance(RecordingView(), View)


def test_main_output(capsys: pytest.CaptureFixture[str]) -> None:
    main()

    assert capsys.readouterr().out.splitlines() == [
        "Student: ",
        "Name: Robert",
        "Roll No: 10",
        "Student: ",
        "Name: John",
        "Roll No: 10",
    ]
