import os

import pytest
from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Run every test with the default settings."""
    for key in list(os.environ):
        if key.upper().startswith("ARGS_LESSON_"):
            monkeypatch.delenv(key)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
