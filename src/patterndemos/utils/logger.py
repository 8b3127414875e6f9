# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/patterndemos/LICENSE
# ==============================================================================

"""Logging utilities for the pattern demos.

Demo output goes to the demo stream; logging carries diagnostics only: which
shape the facade delegated to, which state a context switched to, which field
a controller mutated. Those call sites pass their details as
``extra={"context": {...}}``. The text formatters render that mapping as a
``key=value`` suffix and the JSON formatter nests it under ``"context"``.

Nothing here runs at import time. Library modules use
``logging.getLogger(__name__)``; only entry points (the CLI, the examples)
call :func:`setup_logger`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
import json
import logging
import os
import sys
from typing import IO, Any, ClassVar, Final


RESET: Final[str] = "\033[0m"
LOGGER_COLOR: Final[str] = "\033[94m"     # Bright blue
CONTEXT_COLOR: Final[str] = "\033[2m"     # Dim

DEFAULT_LOGGER_NAME: Final[str] = "patterndemos"
ENV_LOG_LEVEL: Final[str] = "PATTERNDEMOS_LOG_LEVEL"
ENV_LOG_JSON: Final[str] = "PATTERNDEMOS_LOG_JSON"
ENV_NO_COLOR: Final[str] = "NO_COLOR"
# Demo runs are short; the time of day is enough.
DEFAULT_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DEFAULT_DATEFMT: Final[str] = "%H:%M:%S"

JsonSerializer = Callable[[dict[str, Any]], str]
PayloadTransformer = Callable[[dict[str, Any]], dict[str, Any]]

# Attributes every LogRecord carries; anything else on a record came from ``extra``.
_BUILTIN_RECORD_KEYS: frozenset[str] = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "context", "taskName"}


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Collect the diagnostic details attached to *record*.

    Keys from ``extra={"context": {...}}`` come first, then any other
    non-builtin attribute passed through ``extra``.
    """
    context: dict[str, Any] = {}
    attached = getattr(record, "context", None)
    if isinstance(attached, Mapping):
        context.update(attached)
    for key, value in record.__dict__.items():
        if key in _BUILTIN_RECORD_KEYS or key.startswith("_") or key in context:
            continue
        context[key] = value
    return context


class PlainFormatter(logging.Formatter):
    """Text formatter that appends the record's context as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        rendered = super().format(record)
        context = record_context(record)
        if not context:
            return rendered
        return f"{rendered} {self.format_context(context)}"

    def format_context(self, context: Mapping[str, Any]) -> str:
        return " ".join(f"{key}={_format_value(value)}" for key, value in context.items())


class ColoredFormatter(PlainFormatter):
    """:class:`PlainFormatter` with ANSI colors on the level, logger name and context.

    Override LEVEL_COLORS to customize colors for each log level.
    """

    LEVEL_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",       # Cyan
        "INFO": "\033[32m",        # Green
        "WARNING": "\033[33m",     # Yellow
        "ERROR": "\033[1;31m",     # Bold bright red
        "CRITICAL": "\033[1;35m",  # Bold bright magenta
    }

    def format(self, record: logging.LogRecord) -> str:
        orig_levelname = record.levelname
        orig_name = record.name

        record.levelname = f"{self.LEVEL_COLORS.get(orig_levelname, '')}{orig_levelname}{RESET}"
        record.name = f"{LOGGER_COLOR}{orig_name}{RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = orig_levelname
            record.name = orig_name

    def format_context(self, context: Mapping[str, Any]) -> str:
        return f"{CONTEXT_COLOR}{super().format_context(context)}{RESET}"


class StructuredJSONFormatter(logging.Formatter):
    """One JSON object per record, built by a user-provided serializer."""

    def __init__(
        self,
        serializer: JsonSerializer,
        *,
        datefmt: str | None = None,
        payload_transformer: PayloadTransformer | None = None,
    ) -> None:
        super().__init__(datefmt=datefmt)
        self._serializer = serializer
        self._transformer = payload_transformer or (lambda payload: payload)

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        context = record_context(record)
        if context:
            payload["context"] = context
        return self._serializer(self._transformer(payload))


class PatternDemosHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """The one handler :func:`setup_logger` installs on the root logger.

    It is recognised by type, which is what keeps repeated ``setup_logger``
    calls idempotent; subclass it rather than attaching a bare
    ``StreamHandler``. Without an explicit stream it writes to whatever
    ``sys.stderr`` is at emit time, so demo output on stdout stays clean and
    redirected stderr is honoured.
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        super().__init__(stream)
        self._follow_stderr = stream is None

    def emit(self, record: logging.LogRecord) -> None:
        if self._follow_stderr:
            self.stream = sys.stderr
        super().emit(record)


def _default_json_serializer(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, default=str)


def _package_handlers(root: logging.Logger) -> list[PatternDemosHandler]:
    return [handler for handler in root.handlers if isinstance(handler, PatternDemosHandler)]


def _read_bool_env(key: str) -> bool:
    value = os.getenv(key)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv(ENV_LOG_LEVEL) or logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(
    *,
    level: int | str | None = None,
    use_json: bool | None = None,
    use_color: bool | None = None,
    json_serializer: JsonSerializer | None = None,
    payload_transformer: PayloadTransformer | None = None,
    fmt: str | None = None,
    datefmt: str | None = DEFAULT_DATEFMT,
    force: bool = False,
) -> None:
    """Configure the root logger for a patterndemos entry point.

    Args:
        level: Override the log level. Falls back to ``PATTERNDEMOS_LOG_LEVEL``
            then ``logging.INFO``.
        use_json: Enable JSON output. Defaults to ``PATTERNDEMOS_LOG_JSON``.
        use_color: Enable colored output. Defaults to ``True`` unless ``NO_COLOR``
            is set or JSON output is on.
        json_serializer: Callable that converts the payload dict into a JSON
            string, e.g. one backed by ``orjson``.
        payload_transformer: Callable applied to the payload before
            serialization.
        fmt: Format string for text output.
        datefmt: Date format for text and JSON timestamps.
        force: Replace the package handler if one is already attached.

    """
    root = logging.getLogger()
    existing = _package_handlers(root)
    if existing and not force:
        return
    for handler in existing:
        root.removeHandler(handler)
        handler.close()

    resolved_level = _resolve_level(level)
    root.setLevel(resolved_level)

    resolved_use_json = use_json if use_json is not None else _read_bool_env(ENV_LOG_JSON)
    # explicit param > NO_COLOR env > default (colored unless JSON)
    if use_color is not None:
        resolved_use_color = use_color
    else:
        resolved_use_color = not resolved_use_json and not os.getenv(ENV_NO_COLOR)

    formatter: logging.Formatter
    if resolved_use_json:
        formatter = StructuredJSONFormatter(
            json_serializer or _default_json_serializer,
            datefmt=datefmt,
            payload_transformer=payload_transformer,
        )
    elif resolved_use_color:
        formatter = ColoredFormatter(fmt or DEFAULT_FORMAT, datefmt=datefmt)
    else:
        formatter = PlainFormatter(fmt or DEFAULT_FORMAT, datefmt=datefmt)

    handler = PatternDemosHandler()
    handler.setLevel(resolved_level)
    handler.setFormatter(formatter)
    root.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger for an entry point, attaching the package handler if missing.

    Library modules should use ``logging.getLogger(__name__)`` instead so
    importing them never touches the root logger.
    """
    if not _package_handlers(logging.getLogger()):
        setup_logger()
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)


__all__ = [
    "DEFAULT_LOGGER_NAME",
    "ColoredFormatter",
    "PatternDemosHandler",
    "PlainFormatter",
    "StructuredJSONFormatter",
    "get_logger",
    "record_context",
    "setup_logger",
]
