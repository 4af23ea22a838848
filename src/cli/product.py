"""`product` command: multiply integer arguments."""

from __future__ import annotations

import typer

from cli.ui_components import configure_streams, echo_err, echo_out, load_settings
from core.domain.errors import NonIntegerArgumentError
from core.services.product import compute_product

NO_ARGUMENTS_MESSAGE = "No command-line arguments were entered."
NON_INTEGER_MESSAGE = "Did not enter in an integer argument."

# Negative numbers look like short options and "--help" is a token like any
# other; hand them all to the command as-is.
CONTEXT_SETTINGS = {"ignore_unknown_options": True, "help_option_names": []}

app = typer.Typer(add_completion=False, help="Multiply integer command-line arguments.")


def product(
    numbers: list[str] | None = typer.Argument(
        None,
        metavar="[INTEGER]...",
        help="Base-10 signed integers to multiply.",
        show_default=False,
    ),
) -> None:
    """Print the product of the given integers."""

    tokens = numbers or []
    if not tokens:
        echo_out(NO_ARGUMENTS_MESSAGE)
        return

    settings = load_settings()
    try:
        result = compute_product(tokens, bits=settings.integer_bits)
    except NonIntegerArgumentError as exc:
        echo_err(NON_INTEGER_MESSAGE)
        echo_err(str(exc))
        return

    echo_out(f"The product is: {result.value}")


app.command(context_settings=CONTEXT_SETTINGS)(product)


def run() -> None:
    configure_streams()
    app()


if __name__ == "__main__":
    run()
