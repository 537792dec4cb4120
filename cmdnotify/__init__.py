"""cmdnotify: run a program and get a desktop notification when it exits."""

from __future__ import annotations

from cmdnotify.command import CommandSpec
from cmdnotify.errors import CmdnotifyError, MissingDependencyError, PrivilegeError, UsageError
from cmdnotify.exit_codes import ExitCode
from cmdnotify.notifier import Notification, build_notification, send_notification
from cmdnotify.resolver import BinaryResolver
from cmdnotify.runner import RunResult, run_program

__version__ = "1.0.0"
__all__ = [
    "BinaryResolver",
    "CmdnotifyError",
    "CommandSpec",
    "ExitCode",
    "MissingDependencyError",
    "Notification",
    "PrivilegeError",
    "RunResult",
    "UsageError",
    "build_notification",
    "run_program",
    "send_notification",
]
