"""Command specification for the wrapped program."""

from __future__ import annotations

import os
import shlex
from collections.abc import Sequence
from dataclasses import dataclass

from cmdnotify.errors import Suggestion, UsageError


@dataclass(frozen=True)
class CommandSpec:
    """The program to run and its arguments, passed through verbatim."""

    program: str
    arguments: tuple[str, ...] = ()

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> CommandSpec:
        """Build a spec from cmdnotify's own argv (argv[0] is cmdnotify)."""

        if len(argv) < 2:
            raise UsageError(
                message="Too few arguments!",
                code="E1001",
                suggestion=Suggestion(
                    action="name a program to run",
                    fix="Pass the program and its arguments after cmdnotify.",
                    example="cmdnotify make -j4",
                ),
                details={"argc": len(argv)},
            )
        return cls.from_parts(argv[1], argv[2:])

    @classmethod
    def from_parts(cls, program: str, arguments: Sequence[str] = ()) -> CommandSpec:
        if not program:
            raise UsageError(message="Program name must not be empty.", code="E1002")
        if program in (os.curdir, os.pardir) or os.sep in program or (os.altsep and os.altsep in program):
            raise UsageError(
                message=f"Program name must be a bare name, not a path: {program}",
                code="E1002",
                suggestion=Suggestion(
                    action="use a bare program name",
                    fix="Programs are looked up in the configured binary directories only.",
                    example=f"cmdnotify {os.path.basename(program).strip('.') or 'true'}",
                ),
                details={"program": program},
            )
        return cls(program=program, arguments=tuple(arguments))

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.arguments]

    def display(self) -> str:
        """Shell-quoted rendering, for messages only."""
        return shlex.join(self.argv)
