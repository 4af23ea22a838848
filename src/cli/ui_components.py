"""Console helpers shared by the commands (Rich + Typer).

Why separate:
- Keeps command bodies about the contract, not about streams.
- Program output goes through `typer.echo` so file content and numbers are
  printed verbatim; only the failure report uses Rich rendering.
"""

from __future__ import annotations

import sys

import typer
from pydantic import ValidationError
from rich.console import Console

from core.config import AppSettings

# Rich resolves sys.stderr at print time, so test runners that swap the
# stream still capture it.
err_console = Console(stderr=True)


def configure_streams() -> None:
    """Force UTF-8 on Windows terminals (cp1252 cannot print arbitrary files)."""

    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")


def load_settings() -> AppSettings:
    """Build settings from the environment, falling back to defaults.

    An invalid `ARGS_LESSON_*` value gets a one-line warning on stderr and is
    otherwise ignored, so the commands keep their output and exit status.
    """

    try:
        return AppSettings()
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
        err_console.print(
            f"[yellow]Warning:[/yellow] ignoring invalid ARGS_LESSON_ settings ({fields}); using defaults.",
            highlight=False,
            soft_wrap=True,
        )
        return AppSettings.model_construct()


def echo_out(message: str) -> None:
    # color=True: never strip escape sequences that are part of the content.
    typer.echo(message, color=True)


def echo_err(message: str) -> None:
    typer.echo(message, err=True)


def print_failure_report(*, show_locals: bool = False) -> None:
    """Render the exception being handled as a full traceback on stderr.

    Must be called from inside an `except` block.
    """

    err_console.print_exception(show_locals=show_locals)
