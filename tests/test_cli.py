# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/patterndemos/LICENSE
# ==============================================================================

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
import subprocess
import sys

import pytest

from patterndemos import cli
from patterndemos.exceptions import UnknownDemoError


def test_runs_single_demo() -> None:
    stream = io.StringIO()

    assert cli.main(["facade"], stream) == 0
    assert stream.getvalue().splitlines() == ["Circle::draw()", "Rectangle::draw()", "Square::draw()"]


def test_defaults_to_all(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([]) == 0

    out = capsys.readouterr().out
    assert "== Facade pattern ==" in out
    assert "Name: John" in out
    assert out.rstrip().endswith("Stop State")


def test_list() -> None:
    stream = io.StringIO()

    assert cli.main(["--list"], stream) == 0
    names = [line.split()[0] for line in stream.getvalue().splitlines()]
    assert names == ["facade", "mvc", "state"]


def test_unknown_demo_is_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["observer"])

    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_log_level_override() -> None:
    root = logging.getLogger()
    original = root.level
    try:
        assert cli.main(["state", "--log-level", "DEBUG"], io.StringIO()) == 0
        assert root.level == logging.DEBUG
    finally:
        cli.setup_logger(level=original, force=True)


def test_demo_error_maps_to_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(name: str, stream: object = None) -> None:
        raise UnknownDemoError(name)

    monkeypatch.setattr(cli, "run_demo", _boom)

    assert cli.main(["mvc"], io.StringIO()) == 1


def test_python_dash_m_runs_demo() -> None:
    src = str(Path(__file__).resolve().parents[1] / "src")
    env = {**os.environ, "PYTHONPATH": os.pathsep.join(filter(None, [src, os.environ.get("PYTHONPATH")]))}

    completed = subprocess.run(
        [sys.executable, "-m", "patterndemos", "state"],
        capture_output=True,
        text=True,
        env=env,
    )

    assert completed.returncode == 0, completed.stderr
    assert completed.stdout.splitlines() == [
        "Player is in start state",
        "Start State",
        "Player is in stop state",
        "Stop State",
    ]
