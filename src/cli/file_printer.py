"""`print-file` command: print a text file given as the only argument."""

from __future__ import annotations

from pathlib import Path

import typer

from cli.ui_components import configure_streams, echo_out, load_settings, print_failure_report
from core.services.file_printer import read_file_content

USAGE_MESSAGE = "Please specify one file path as a command-line argument."

CONTEXT_SETTINGS = {"ignore_unknown_options": True, "help_option_names": []}

app = typer.Typer(add_completion=False, help="Print the contents of a text file.")


def print_file(
    paths: list[str] | None = typer.Argument(
        None,
        metavar="PATH",
        help="Path of the file to print (exactly one).",
        show_default=False,
    ),
) -> None:
    """Read the file line by line and print its full content once."""

    tokens = paths or []
    if len(tokens) != 1:
        echo_out(USAGE_MESSAGE)
        return

    settings = load_settings()
    try:
        content = read_file_content(Path(tokens[0]), encoding=settings.file_encoding)
    except (OSError, UnicodeDecodeError):
        print_failure_report(show_locals=settings.show_locals)
        return

    echo_out(content.text)


app.command(context_settings=CONTEXT_SETTINGS)(print_file)


def run() -> None:
    configure_streams()
    app()


if __name__ == "__main__":
    run()
