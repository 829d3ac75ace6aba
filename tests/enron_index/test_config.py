"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from enron_index.config import Settings, _get_int, get_settings

_ENV_KEYS = (
    "MAILDIR_PATH",
    "INDEX_NAME",
    "BATCH_SIZE",
    "FILE_ENCODING",
    "LOG_LEVEL",
    "WEAVIATE_HOST",
    "WEAVIATE_PORT",
    "WEAVIATE_GRPC_PORT",
    "WEAVIATE_API_KEY",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()


class TestSettings:
    """Defaults and environment overrides."""

    def test_defaults_when_env_empty(self) -> None:
        settings = get_settings()

        assert settings.index_name == "EnronEmail"
        assert settings.batch_size == 100
        assert settings.file_encoding == "utf-8"
        assert settings.log_level == "INFO"
        assert settings.weaviate_host == "localhost"
        assert settings.weaviate_port == 8080
        assert settings.weaviate_grpc_port == 50051
        assert settings.weaviate_api_key is None
        assert settings.maildir_path.name == "maildir"

    def test_values_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAILDIR_PATH", str(tmp_path))
        monkeypatch.setenv("INDEX_NAME", "EnronTest")
        monkeypatch.setenv("BATCH_SIZE", "25")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("WEAVIATE_PORT", "1234")

        settings = get_settings()

        assert settings.maildir_path == tmp_path
        assert settings.index_name == "EnronTest"
        assert settings.batch_size == 25
        assert settings.log_level == "DEBUG"
        assert settings.weaviate_port == 1234

    def test_rejects_non_positive_batch_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BATCH_SIZE", "0")

        with pytest.raises(ValueError, match="BATCH_SIZE must be positive"):
            Settings()

    def test_headers_include_api_key(self) -> None:
        settings = Settings(weaviate_api_key="token")

        assert settings.headers == {"X-API-KEY": "token"}

    def test_headers_none_without_key(self) -> None:
        assert Settings().headers is None


def test_get_int_rejects_non_numeric(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEAVIATE_PORT", "not-a-number")

    with pytest.raises(ValueError) as excinfo:
        _get_int("WEAVIATE_PORT", default=8080)

    assert "WEAVIATE_PORT must be an integer" in str(excinfo.value)
