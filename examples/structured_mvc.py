# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/patterndemos/LICENSE
# ==============================================================================

"""MVC demo with a JSON view and structured JSON logging.

Demonstrates:
- Swapping the text view for :class:`JsonStudentView` without touching the
  controller or the model
- Routing DEBUG diagnostics through ``orjson``-serialized JSON logs, with the
  log context shaped by a Pydantic model

Usage:
    uv run python examples/structured_mvc.py
"""

from __future__ import annotations

from typing import Any

import orjson
from pydantic import BaseModel

from patterndemos.mvc import JsonStudentView, StudentController, retrieve_student_from_database
from patterndemos.utils.logger import get_logger, setup_logger


class MutationEvent(BaseModel):
    before: str | None = None
    after: str | None = None
    name: str | None = None
    roll_no: str | None = None


def _serialize(payload: dict[str, Any]) -> str:
    return orjson.dumps(payload, default=str).decode()


def _shape_context(payload: dict[str, Any]) -> dict[str, Any]:
    context = payload.get("context")
    if not context:
        return payload
    return {**payload, "context": MutationEvent(**context).model_dump(exclude_none=True)}


setup_logger(
    level="DEBUG",
    use_json=True,
    json_serializer=_serialize,
    payload_transformer=_shape_context,
    force=True,
)

log = get_logger(__name__)


def main() -> None:
    controller = StudentController(retrieve_student_from_database(), JsonStudentView())

    controller.update_view()
    controller.set_student_name("John")
    controller.set_student_roll_no("11")
    controller.update_view()
    log.info("done")


if __name__ == "__main__":
    main()
