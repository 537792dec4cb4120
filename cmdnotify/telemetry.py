"""Optional OpenTelemetry instrumentation for wrapped runs."""

from __future__ import annotations

import importlib
import os
from typing import Any


def _parse_bool_env(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on", "enabled"}


def _load_opentelemetry_trace() -> Any:
    return importlib.import_module("opentelemetry.trace")


def _is_enabled() -> bool:
    return _parse_bool_env(os.getenv("CMDNOTIFY_OTEL_ENABLED"))


class _NoopRunSpan:
    """Span handle used when OTel is disabled or unavailable."""

    def set_outcome(self, *, exit_code: int, duration_ms: int) -> None:
        del exit_code, duration_ms

    def end(self) -> None:
        pass


class _ActiveRunSpan:
    def __init__(self, span: Any, program: str, arguments: list[str]) -> None:
        self._span = span
        self._ended = False
        self._span.set_attribute("cmdnotify.program", program)
        self._span.set_attribute("cmdnotify.arguments", arguments)

    def set_outcome(self, *, exit_code: int, duration_ms: int) -> None:
        if self._ended:
            return

        self._span.set_attribute("cmdnotify.exit_code", exit_code)
        self._span.set_attribute("cmdnotify.duration_ms", duration_ms)

        if exit_code != 0:
            try:
                from opentelemetry.trace import (  # type: ignore[import-not-found]
                    Status,
                    StatusCode,
                )

                self._span.set_status(Status(StatusCode.ERROR, f"exit_code={exit_code}"))
            except Exception:
                # API may vary across versions; keep telemetry best effort.
                self._span.set_attribute("cmdnotify.status", "error")

        self.end()

    def end(self) -> None:
        if self._ended:
            return
        self._ended = True
        self._span.end()


def start_run_span(*, program: str, arguments: list[str]) -> _NoopRunSpan | _ActiveRunSpan:
    """Create a span handle for one wrapped run."""

    if not _is_enabled():
        return _NoopRunSpan()

    try:
        trace = _load_opentelemetry_trace()
        tracer = trace.get_tracer("cmdnotify")
        return _ActiveRunSpan(tracer.start_span("cmdnotify.run"), program, list(arguments))
    except Exception:
        return _NoopRunSpan()
