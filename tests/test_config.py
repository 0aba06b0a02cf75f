"""Unit tests for settings parsing."""

import pytest

from cheese_wizard.core.config import AppSettings, LogSettings, parse_seed_cheeses


class TestParseSeedCheeses:
    def test_parse_multiple_names(self) -> None:
        assert parse_seed_cheeses("Chedder,Brie") == ["Chedder", "Brie"]

    def test_parse_trims_whitespace_and_blanks(self) -> None:
        assert parse_seed_cheeses(" Colby Jack , ,Brie ") == ["Colby Jack", "Brie"]

    @pytest.mark.parametrize("raw", [None, "", " , "])
    def test_parse_empty_returns_empty_list(self, raw) -> None:
        assert parse_seed_cheeses(raw) == []


def test_app_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_API_PREFIX", "/api/v9")
    monkeypatch.setenv("APP_SEED_CHEESES", "Brie")

    cfg = AppSettings()

    assert cfg.api_prefix == "/api/v9"
    assert cfg.seed_cheeses == "Brie"


def test_log_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)

    cfg = LogSettings()

    assert cfg.level == "INFO"
    assert cfg.format == "json"
    assert cfg.output == "stdout"
    assert cfg.request_id_header == "X-Request-ID"
