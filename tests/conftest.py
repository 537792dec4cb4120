"""Shared test fixtures for cmdnotify tests."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cmdnotify import preflight

NOTIFIER_STUB = """#!/bin/sh
printf '%s\\0' "$@" >> "{log}"
exit {code}
"""


def _write_script(path: Path, script: str) -> Path:
    path.write_text(script)
    path.chmod(0o755)
    return path


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test as an unprivileged user with no CMDNOTIFY_* overrides."""
    for key in list(os.environ):
        if key.startswith("CMDNOTIFY_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(preflight, "_get_euid", lambda: 1000)


@pytest.fixture
def runner() -> CliRunner:
    """Provide a CLI test runner."""
    return CliRunner()


@pytest.fixture
def bindir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A binary directory wired in through CMDNOTIFY_BINDIR."""
    directory = tmp_path / "bin"
    directory.mkdir()
    monkeypatch.setenv("CMDNOTIFY_BINDIR", str(directory))
    return directory


@pytest.fixture
def make_program(bindir: Path) -> Callable[[str, str], Path]:
    """Factory writing an executable /bin/sh script into ``bindir``."""

    def factory(name: str, body: str) -> Path:
        return _write_script(bindir / name, "#!/bin/sh\n" + body)

    return factory


@pytest.fixture
def notify_log(tmp_path: Path) -> Path:
    return tmp_path / "notify.log"


@pytest.fixture
def notifier(tmp_path: Path, notify_log: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A recording notify-send stub wired in through CMDNOTIFY_NOTIFIER."""
    directory = tmp_path / "notifier"
    directory.mkdir()
    path = _write_script(directory / "notify-send", NOTIFIER_STUB.format(log=notify_log, code=0))
    monkeypatch.setenv("CMDNOTIFY_NOTIFIER", str(path))
    return path


@pytest.fixture
def notifications(notify_log: Path) -> Callable[[], list[list[str]]]:
    """Return one argument list per recorded notifier call.

    Each call records ``-t <ms> -u <urgency> <summary> <body>``.
    """

    def read() -> list[list[str]]:
        if not notify_log.exists():
            return []
        fields = notify_log.read_text().split("\0")[:-1]
        return [fields[i : i + 6] for i in range(0, len(fields), 6)]

    return read
