"""Central exit-code taxonomy for cmdnotify."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes produced by cmdnotify itself.

    On the normal path the wrapped program's own exit code is propagated
    instead, so these only cover what the wrapper decides on its own.
    """

    SUCCESS = 0
    PREFLIGHT_FAILURE = 1
    CANNOT_EXECUTE = 126
    SIGNAL_BASE = 128
