"""Compose and deliver the completion notification."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from cmdnotify.command import CommandSpec
from cmdnotify.config import DEFAULT_MAX_COMMAND, DEFAULT_TIMEOUT_MS

logger = logging.getLogger(__name__)

SUCCESS_SUMMARY = "Success"
FAILURE_SUMMARY = "Error"

SUCCESS_URGENCY = "normal"
FAILURE_URGENCY = "critical"

_ELLIPSIS = "..."


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: str
    body: str
    urgency: str = SUCCESS_URGENCY
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, ge=0)

    def to_args(self) -> list[str]:
        """Arguments for notify-send, after the binary itself."""
        return ["-t", str(self.timeout_ms), "-u", self.urgency, self.summary, self.body]


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    if limit <= len(_ELLIPSIS):
        return text[:limit]
    return text[: limit - len(_ELLIPSIS)] + _ELLIPSIS


def build_notification(
    exit_code: int,
    spec: CommandSpec,
    *,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    max_command_length: int = DEFAULT_MAX_COMMAND,
) -> Notification:
    command = _truncate(spec.display(), max_command_length)
    if exit_code == 0:
        return Notification(
            summary=SUCCESS_SUMMARY,
            body=f"'{command}' has finished and returned 0",
            urgency=SUCCESS_URGENCY,
            timeout_ms=timeout_ms,
        )
    return Notification(
        summary=FAILURE_SUMMARY,
        body=f"'{command}' has returned non-zero value {exit_code}",
        urgency=FAILURE_URGENCY,
        timeout_ms=timeout_ms,
    )


def send_notification(notifier: Path, notification: Notification) -> None:
    """Run the notifier, wait for it and ignore how it went.

    Delivery is best effort: neither a failing notifier nor one that
    cannot be launched affects the caller.
    """

    cmd = [str(notifier), *notification.to_args()]
    try:
        completed = subprocess.run(
            cmd,
            check=False,
            stdin=subprocess.DEVNULL,
            capture_output=True,
        )
    except OSError as exc:
        logger.debug("notifier %s could not be launched: %s", notifier, exc)
        return
    if completed.returncode != 0:
        logger.debug("notifier %s exited with %d", notifier, completed.returncode)
