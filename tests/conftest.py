# tests/conftest.py
from __future__ import annotations

import json
import logging
import stat
import sys
from pathlib import Path
from typing import Callable

import pytest

FAKE_TOOL = """\
import json
import os
import signal
import sys
import time

with open({log!r}, "a", encoding="utf-8") as fh:
    fh.write(
        json.dumps(
            {{
                "argv": sys.argv[1:],
                "cwd": os.getcwd(),
                "env": os.environ.get("PROJTASKS_TEST"),
                "pid": os.getpid(),
            }}
        )
        + "\\n"
    )

print({name!r} + " stdout", flush=True)
print({name!r} + " stderr", file=sys.stderr, flush=True)

if {sleep_s}:
    time.sleep({sleep_s})
if {kill_signal}:
    os.kill(os.getpid(), signal.Signals({kill_signal}))
sys.exit({exit_code})
"""


class FakeTool:
    """An executable on disk that records each invocation to a JSON-lines log."""

    def __init__(self, path: Path, log: Path):
        self.path = path
        self.log = log

    def calls(self) -> list[dict]:
        if not self.log.exists():
            return []
        return [json.loads(line) for line in self.log.read_text("utf-8").splitlines()]


@pytest.fixture
def fake_tool(tmp_path: Path) -> Callable[..., FakeTool]:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()

    def make(
        name: str,
        exit_code: int = 0,
        *,
        sleep_s: float = 0,
        kill_signal: int = 0,
    ) -> FakeTool:
        log = bin_dir / f"{name}.log"
        script = bin_dir / f"{name}.py"
        script.write_text(
            FAKE_TOOL.format(
                log=str(log),
                name=name,
                exit_code=exit_code,
                sleep_s=sleep_s,
                kill_signal=int(kill_signal),
            ),
            encoding="utf-8",
        )

        # A /bin/sh wrapper keeps the shebang short whatever the interpreter path.
        wrapper = bin_dir / name
        wrapper.write_text(
            f'#!/bin/sh\nexec "{sys.executable}" "{script}" "$@"\n', encoding="utf-8"
        )
        wrapper.chmod(wrapper.stat().st_mode | stat.S_IXUSR)
        return FakeTool(wrapper, log)

    return make


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    wd = tmp_path / "project"
    wd.mkdir()
    monkeypatch.chdir(wd)
    return wd


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
