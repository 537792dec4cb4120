"""Run the wrapped program and collect its exit code."""

from __future__ import annotations

import logging
import signal
import subprocess
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from cmdnotify.command import CommandSpec
from cmdnotify.exit_codes import ExitCode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    exit_code: int
    pid: int | None
    duration_ms: int

    @property
    def ok(self) -> bool:
        return self.exit_code == ExitCode.SUCCESS


def normalize_returncode(returncode: int) -> int:
    """Map a Popen returncode to a shell-style exit code.

    Negative values mean the child died from a signal; report those as
    128 + signal number.
    """

    if returncode < 0:
        return int(ExitCode.SIGNAL_BASE) - returncode
    return returncode


@contextmanager
def _ignoring_interrupts() -> Iterator[None]:
    """Ignore SIGINT and SIGQUIT in this process while the child runs.

    The terminal delivers them to the whole process group; the child's exit
    code reports what they did. Only the main thread can change handlers.
    """

    if threading.current_thread() is not threading.main_thread():
        yield
        return

    signums = [signal.SIGINT]
    if hasattr(signal, "SIGQUIT"):
        signums.append(signal.SIGQUIT)
    previous = {signum: signal.signal(signum, signal.SIG_IGN) for signum in signums}
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def run_program(path: Path, spec: CommandSpec) -> RunResult:
    """Spawn ``path`` with ``spec.argv`` and block until that child exits.

    stdio and environment are inherited. ``argv[0]`` stays the bare
    program name.
    """

    start = time.perf_counter()
    try:
        with subprocess.Popen(spec.argv, executable=str(path)) as proc:
            logger.debug("started %s as pid %d", path, proc.pid)
            with _ignoring_interrupts():
                returncode = proc.wait()
    except OSError as exc:
        logger.error("could not execute %s: %s", path, exc)
        return RunResult(
            exit_code=int(ExitCode.CANNOT_EXECUTE),
            pid=None,
            duration_ms=_elapsed_ms(start),
        )

    exit_code = normalize_returncode(returncode)
    logger.debug("pid %d exited with %d (returncode %d)", proc.pid, exit_code, returncode)
    return RunResult(exit_code=exit_code, pid=proc.pid, duration_ms=_elapsed_ms(start))


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)
