"""Tests for composing and delivering notifications."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from cmdnotify.command import CommandSpec
from cmdnotify.notifier import (
    FAILURE_SUMMARY,
    SUCCESS_SUMMARY,
    Notification,
    build_notification,
    send_notification,
)


def test_success_notification() -> None:
    notification = build_notification(0, CommandSpec.from_parts("true"))

    assert notification.summary == SUCCESS_SUMMARY == "Success"
    assert notification.body == "'true' has finished and returned 0"
    assert notification.urgency == "normal"
    assert notification.timeout_ms == 3500


@pytest.mark.parametrize("code", [1, 2, 130])
def test_failure_notification_includes_code(code: int) -> None:
    notification = build_notification(code, CommandSpec.from_parts("make", ["all"]))

    assert notification.summary == FAILURE_SUMMARY == "Error"
    assert notification.body == f"'make all' has returned non-zero value {code}"
    assert notification.urgency == "critical"


def test_long_commands_are_truncated() -> None:
    spec = CommandSpec.from_parts("echo", ["x" * 500])

    notification = build_notification(0, spec, max_command_length=20)

    assert notification.body.startswith("'echo " + "x" * 12 + "...'")
    assert len(notification.body.split("'")[1]) == 20


def test_to_args_order() -> None:
    notification = Notification(summary="Error", body="b", urgency="critical", timeout_ms=10)
    assert notification.to_args() == ["-t", "10", "-u", "critical", "Error", "b"]


def test_negative_timeout_is_invalid() -> None:
    with pytest.raises(ValidationError):
        Notification(summary="Success", body="b", timeout_ms=-1)


@pytest.mark.skipif(os.name != "posix", reason="stub notifier is a /bin/sh script")
def test_send_invokes_notifier_with_discrete_arguments(notifier: Path, notifications) -> None:
    notification = build_notification(1, CommandSpec.from_parts("false", ["$(whoami)"]))

    send_notification(notifier, notification)

    assert notifications() == [
        ["-t", "3500", "-u", "critical", "Error", "'false '$(whoami)'' has returned non-zero value 1"]
    ]


@pytest.mark.skipif(os.name != "posix", reason="stub notifier is a /bin/sh script")
def test_send_ignores_notifier_failure(tmp_path: Path) -> None:
    broken = tmp_path / "notify-send"
    broken.write_text("#!/bin/sh\necho boom >&2\nexit 4\n")
    broken.chmod(0o755)

    send_notification(broken, build_notification(0, CommandSpec.from_parts("true")))


def test_send_ignores_unlaunchable_notifier(tmp_path: Path) -> None:
    send_notification(tmp_path / "missing", build_notification(0, CommandSpec.from_parts("true")))
