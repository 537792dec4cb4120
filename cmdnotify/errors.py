"""cmdnotify error hierarchy and structured error models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel

from cmdnotify.exit_codes import ExitCode


class ErrorCategory(str, Enum):
    INPUT = "input"
    AUTH = "auth"
    STATE = "state"


class Suggestion(BaseModel):
    action: str
    fix: str
    example: str | None = None


class CmdnotifyError(Exception):
    """Base error for every preflight failure."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        suggestion: Suggestion | None = None,
        details: dict[str, Any] | None = None,
        exit_code: ExitCode | int = ExitCode.PREFLIGHT_FAILURE,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.suggestion = suggestion
        self.details = details or {}
        self.exit_code = int(exit_code)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "category": self.category.value,
            "suggestion": self.suggestion.model_dump() if self.suggestion else None,
            "details": self.details,
        }


class UsageError(CmdnotifyError):
    """E1xxx: Bad invocation of cmdnotify itself."""

    def __init__(
        self,
        message: str,
        code: str = "E1000",
        suggestion: Suggestion | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code,
            category=ErrorCategory.INPUT,
            suggestion=suggestion,
            details=details,
        )


class PrivilegeError(CmdnotifyError):
    """E2xxx: Refusal to wrap commands with elevated privileges."""

    def __init__(
        self,
        message: str,
        code: str = "E2000",
        suggestion: Suggestion | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code,
            category=ErrorCategory.AUTH,
            suggestion=suggestion,
            details=details,
        )


class MissingDependencyError(CmdnotifyError):
    """E3xxx: A required binary is not where it is expected."""

    def __init__(
        self,
        message: str,
        code: str = "E3000",
        suggestion: Suggestion | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code,
            category=ErrorCategory.STATE,
            suggestion=suggestion,
            details=details,
        )
