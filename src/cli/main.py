"""Combined development CLI.

Exposes both programs as subcommands so they can be run from a checkout with
`python -m main product 6 7` or `python -m main print-file notes.txt`. The
installed console scripts (`product`, `print-file`) use the single-command
apps directly.
"""

from __future__ import annotations

import typer

from cli import file_printer, product
from cli.ui_components import configure_streams

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Command-line argument exercises.")

app.command(name="product", context_settings=product.CONTEXT_SETTINGS)(product.product)
app.command(name="print-file", context_settings=file_printer.CONTEXT_SETTINGS)(file_printer.print_file)


def run(argv: list[str] | None = None) -> None:
    """Run the combined CLI; `argv` defaults to `sys.argv[1:]`."""

    configure_streams()
    app(args=argv)
