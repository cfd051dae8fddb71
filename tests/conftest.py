"""Shared fixtures for medic tests."""

import pytest

from medic.report import Check, Severity

# Environment variables rich consults when deciding whether to emit colour
COLOR_ENV_VARS = ("FORCE_COLOR", "NO_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE", "COLORTERM")


@pytest.fixture(autouse=True)
def clean_color_env(monkeypatch):
    for name in COLOR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _very_bad():
    raise RuntimeError("Very bad")


@pytest.fixture
def example_checks():
    return [
        Check(name="Check 1", func=lambda: (Severity.OK, "All good")),
        Check(name="Check 2", func=lambda: (Severity.WARNING, "Not so good\nNot at all")),
        Check(name="Check 3", func=_very_bad),
    ]
