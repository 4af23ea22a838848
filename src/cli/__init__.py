"""Command-line layer (Typer apps); owns all console output."""
