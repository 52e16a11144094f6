"""Tests for configuration helpers."""

import pytest

from food_catalog.config import Settings, normalize_prefix


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/api/internal", "/api/internal"),
        ("api/internal/", "/api/internal"),
        ("  /v1/ ", "/v1"),
        ("/", ""),
        ("", ""),
    ],
)
def test_normalize_prefix(raw: str, expected: str) -> None:
    assert normalize_prefix(raw) == expected


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("FOOD_CATALOG_API_PREFIX", "/v2")
    monkeypatch.setenv("FOOD_CATALOG_LOG_LEVEL", "WARNING")

    settings = Settings()

    assert settings.api_prefix == "/v2"
    assert settings.log_level == "WARNING"
