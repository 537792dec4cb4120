"""Configuration precedence system for cmdnotify."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from cmdnotify.errors import Suggestion, UsageError

ENV_PREFIX = "CMDNOTIFY_"

DEFAULT_BINDIR = "/bin"
DEFAULT_NOTIFIER = "/bin/notify-send"
DEFAULT_TIMEOUT_MS = 3500
DEFAULT_MAX_COMMAND = 200

_INT_KEYS = {"timeout", "max_command"}


class CmdnotifyConfig:
    """Resolves configuration through the precedence chain.

    Defaults, then ``CMDNOTIFY_*`` environment variables, then explicit
    overrides (CLI options). ``None`` overrides are ignored so unset
    options never mask the environment. Integer settings given as strings
    are validated the same way from either source.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> None:
        self._config: dict[str, Any] = {}
        self._load_defaults()
        self._load_env_vars(os.environ if environ is None else environ)
        self._load_overrides(overrides)

    def _load_defaults(self) -> None:
        self._config = {
            "bindir": DEFAULT_BINDIR,
            "notifier": DEFAULT_NOTIFIER,
            "timeout": DEFAULT_TIMEOUT_MS,
            "max_command": DEFAULT_MAX_COMMAND,
            "verbose": False,
        }

    def _load_env_vars(self, environ: Mapping[str, str]) -> None:
        """Load from CMDNOTIFY_* environment variables."""
        for key, value in environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            config_key = key[len(ENV_PREFIX):].lower()
            if config_key in _INT_KEYS:
                self._config[config_key] = _parse_int(key, value)
            elif config_key == "verbose":
                self._config[config_key] = value.strip().lower() in ("true", "1", "yes")
            else:
                self._config[config_key] = value

    def _load_overrides(self, overrides: dict[str, Any]) -> None:
        for key, value in overrides.items():
            if value is None:
                continue
            if key in _INT_KEYS and isinstance(value, str):
                value = _parse_int(f"--{key.replace('_', '-')}", value)
            self._config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    @property
    def bindirs(self) -> tuple[str, ...]:
        raw = str(self._config["bindir"])
        return tuple(part for part in raw.split(os.pathsep) if part)

    @property
    def notifier_path(self) -> str:
        return str(self._config["notifier"])

    @property
    def timeout_ms(self) -> int:
        return int(self._config["timeout"])

    @property
    def max_command_length(self) -> int:
        """Longest command text embedded in a notification body."""
        return int(self._config["max_command"])

    @property
    def verbose(self) -> bool:
        return bool(self._config["verbose"])


def _parse_int(name: str, value: str) -> int:
    try:
        parsed = int(value.strip())
    except ValueError:
        parsed = -1
    if parsed < 0:
        raise UsageError(
            message=f"{name} must be a non-negative integer, got {value!r}",
            code="E1003",
            suggestion=Suggestion(
                action="fix setting",
                fix=f"Set {name} to a whole number, or leave it unset.",
                example="cmdnotify --timeout 3500 make",
            ),
            details={"variable": name, "value": value},
        )
    return parsed
