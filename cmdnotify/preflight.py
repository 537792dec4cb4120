"""Checks performed before anything is spawned."""

from __future__ import annotations

import os
from pathlib import Path

from cmdnotify.errors import MissingDependencyError, PrivilegeError, Suggestion


def _effective_uid() -> int | None:
    """Return the effective uid, or None where the platform has no uids."""

    geteuid = getattr(os, "geteuid", None)
    if geteuid is None:
        return None
    return geteuid()


# Module-level alias used by is_superuser so tests can monkeypatch it.
_get_euid = _effective_uid


def is_superuser() -> bool:
    return _get_euid() == 0


def ensure_not_superuser() -> None:
    """Refuse to wrap commands when running with superuser privileges."""

    if is_superuser():
        raise PrivilegeError(
            message="Refusing to run commands as root.",
            code="E2001",
            suggestion=Suggestion(
                action="drop privileges",
                fix="Run cmdnotify as an unprivileged user.",
                example="sudo -u $SUDO_USER cmdnotify make",
            ),
        )


def require_binary(path: Path, role: str) -> Path:
    """Fail unless ``path`` exists. Never executes it."""

    if not path.exists():
        raise MissingDependencyError(
            message=f"{role} not found: {path}",
            code="E3001" if role == "notifier" else "E3002",
            suggestion=Suggestion(
                action=f"install {role}",
                fix=f"Make sure {path.name} is installed in {path.parent}.",
            ),
            details={"role": role, "path": str(path)},
        )
    return path
