"""Tests for search settings validation and SearchConfig."""

import pytest
from pydantic import ValidationError

from app.application.dtos.search import SearchConfig
from app.core.config import Settings


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_defaults() -> None:
    s = _settings()
    assert s.search_provider == "postgres"
    assert s.search_query_max_length == 256
    assert s.search_max_results == 500


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("SEARCH_PROVIDER", "postgres_trigram")
    monkeypatch.setenv("SEARCH_MAX_RESULTS", "50")
    s = _settings()
    assert s.search_provider == "postgres_trigram"
    assert s.search_max_results == 50


@pytest.mark.parametrize(
    "overrides",
    [
        {"search_query_max_length": -1},
        {"search_max_results": -1},
        {"search_provider": "  "},
    ],
)
def test_invalid_search_settings_rejected(overrides) -> None:
    with pytest.raises(ValidationError):
        _settings(**overrides)


def test_search_config_from_settings() -> None:
    config = SearchConfig.from_settings(
        _settings(search_provider="postgres_trigram", search_max_results=100)
    )
    assert config == SearchConfig(
        provider="postgres_trigram", query_max_length=256, max_results=100
    )


def test_zero_disables_limits() -> None:
    config = SearchConfig.from_settings(
        _settings(search_query_max_length=0, search_max_results=0)
    )
    assert config.query_max_length is None
    assert config.max_results is None
