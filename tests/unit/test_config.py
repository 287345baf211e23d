# ABOUTME: Unit tests for configuration loading.
# ABOUTME: Validates API key precedence between the environment and explicit settings.

import pytest

from bookfetch.config import Settings, load_settings, resolve_api_key


class TestResolveApiKey:
    """Tests for resolve_api_key precedence."""

    def test_environment_wins(self) -> None:
        assert resolve_api_key("explicit", {"GOOGLE_BOOKS": "from-env"}) == "from-env"

    def test_explicit_when_env_empty(self) -> None:
        assert resolve_api_key("explicit", {"GOOGLE_BOOKS": ""}) == "explicit"

    def test_explicit_when_env_missing(self) -> None:
        assert resolve_api_key("explicit", {}) == "explicit"

    @pytest.mark.parametrize("explicit", [None, "", "   "])
    def test_none_when_nothing_set(self, explicit: str | None) -> None:
        assert resolve_api_key(explicit, {}) is None

    def test_reads_process_environment_by_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GOOGLE_BOOKS", "process-key")
        assert resolve_api_key(None) == "process-key"


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self) -> None:
        settings = load_settings(environ={})
        assert settings == Settings()
        assert settings.google_books_key is None
        assert settings.max_retries == 3

    def test_overrides(self) -> None:
        settings = load_settings(api_key="k", environ={}, retry_delay=0.0, timeout=5.0)
        assert settings.google_books_key == "k"
        assert settings.retry_delay == 0.0
        assert settings.timeout == 5.0
