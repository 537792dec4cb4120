"""Command-line entry point: run a program, then notify how it went."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import typer

from cmdnotify import __version__
from cmdnotify.command import CommandSpec
from cmdnotify.config import CmdnotifyConfig
from cmdnotify.errors import CmdnotifyError
from cmdnotify.exit_codes import ExitCode
from cmdnotify.notifier import build_notification, send_notification
from cmdnotify.preflight import ensure_not_superuser, require_binary
from cmdnotify.resolver import BinaryResolver
from cmdnotify.runner import run_program
from cmdnotify.telemetry import start_run_span

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Run PROGRAM with ARGS and send a desktop notification when it exits.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cmdnotify {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(stream=sys.stderr, format="cmdnotify: %(levelname)s: %(message)s")
    logging.getLogger("cmdnotify").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _report(error: CmdnotifyError) -> None:
    click.echo(f"Error: {error.message}", err=True)
    if error.suggestion is not None:
        click.echo(f"Hint: {error.suggestion.fix}", err=True)


def _preflight(
    program: str | None,
    arguments: list[str],
    config: CmdnotifyConfig,
) -> tuple[CommandSpec, Path, Path]:
    """Validate the invocation and locate both binaries, in order."""

    argv = ["cmdnotify"] if program is None else ["cmdnotify", program, *arguments]
    spec = CommandSpec.from_argv(argv)
    ensure_not_superuser()
    notifier = require_binary(Path(config.notifier_path), "notifier")
    target = require_binary(BinaryResolver(config.bindirs).resolve(spec.program), spec.program)
    return spec, notifier, target


@app.command(
    context_settings={
        "allow_interspersed_args": False,
        "ignore_unknown_options": True,
    },
)
def run(
    program: str | None = typer.Argument(
        None,
        metavar="PROGRAM",
        show_default=False,
        help="Program to run, looked up in the configured binary directories.",
    ),
    arguments: list[str] | None = typer.Argument(
        None,
        metavar="[ARGS]...",
        show_default=False,
        help="Arguments passed to PROGRAM unchanged.",
    ),
    timeout: str | None = typer.Option(
        None,
        "--timeout",
        "-t",
        metavar="MS",
        show_default=False,
        help="Notification display time in milliseconds.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Run PROGRAM and report its outcome as a desktop notification.

    Options are only recognized before PROGRAM; everything after it
    belongs to PROGRAM. The exit code is PROGRAM's exit code.
    """

    del version
    try:
        config = CmdnotifyConfig(timeout=timeout, verbose=True if verbose else None)
        _configure_logging(config.verbose)
        spec, notifier, target = _preflight(program, arguments or [], config)
    except CmdnotifyError as exc:
        _report(exc)
        raise typer.Exit(code=exc.exit_code) from exc

    logger.debug("running %s via %s", spec.display(), target)
    span = start_run_span(program=spec.program, arguments=list(spec.arguments))
    try:
        result = run_program(target, spec)
        span.set_outcome(exit_code=result.exit_code, duration_ms=result.duration_ms)
    finally:
        span.end()

    notification = build_notification(
        result.exit_code,
        spec,
        timeout_ms=config.timeout_ms,
        max_command_length=config.max_command_length,
    )
    send_notification(notifier, notification)

    raise typer.Exit(code=result.exit_code)


def main() -> None:
    """Console entry point; click usage errors exit like any other preflight failure."""

    try:
        code = app(prog_name="cmdnotify", standalone_mode=False)
    except click.UsageError as exc:
        exc.show()
        code = ExitCode.PREFLIGHT_FAILURE
    sys.exit(int(code or 0))


if __name__ == "__main__":
    main()
