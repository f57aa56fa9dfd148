"""Tests for configuration parsing."""

import logging

import pytest

from recipe_nutrition.config import Settings, parse_log_level


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("ANALYSIS_DEBUG", "true")

    settings = Settings()

    assert settings.log_level == "warning"
    assert settings.analysis_debug is True


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, logging.INFO),
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("10", 10),
        ("verbose", logging.INFO),
    ],
)
def test_parse_log_level(raw: str | None, expected: int) -> None:
    assert parse_log_level(raw) == expected
