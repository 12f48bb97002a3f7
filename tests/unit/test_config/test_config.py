"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest

from socialplus.config import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    ServiceConfig,
    SocialPlusConfig,
    create_default_config,
    load_config,
)


def test_defaults() -> None:
    config = SocialPlusConfig()

    assert config.service.base_url == DEFAULT_BASE_URL
    assert config.service.api_version == DEFAULT_API_VERSION
    assert config.api_root == "https://api.embeddedsocial.microsoft.com/v0.7"
    assert config.service.max_retries == 3


def test_default_file_round_trips(tmp_path: Path) -> None:
    path = tmp_path / "socialplus.toml"

    create_default_config(path, base_url="http://localhost:5000", api_version="v0.8")
    config = load_config(path)

    assert config.api_root == "http://localhost:5000/v0.8"
    assert config.auth.appkey_env == "SOCIALPLUS_APPKEY"
    assert config.logging.level == "INFO"


def test_partial_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "socialplus.toml"
    path.write_text('[service]\nbase_url = "https://example.test/"\n')

    config = load_config(path)

    assert config.service.base_url == "https://example.test"
    assert config.service.timeout_seconds == 30.0
    assert config.api_root == "https://example.test/v0.7"


def test_empty_api_version(tmp_path: Path) -> None:
    path = tmp_path / "socialplus.toml"
    path.write_text('[service]\napi_version = ""\n')

    assert load_config(path).api_root == DEFAULT_BASE_URL


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.toml")


def test_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "socialplus.toml"
    path.write_text("[service\n")

    with pytest.raises(ValueError, match="Invalid TOML"):
        load_config(path)


@pytest.mark.parametrize(
    "service",
    [
        'base_url = "ftp://example.test"',
        "timeout_seconds = 0",
        "timeout_seconds = 601",
        "max_retries = 0",
        "max_retries = 11",
        "retry_backoff_seconds = -1",
    ],
)
def test_invalid_values(tmp_path: Path, service: str) -> None:
    path = tmp_path / "socialplus.toml"
    path.write_text(f"[service]\n{service}\n")

    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(path)


def test_invalid_log_level(tmp_path: Path) -> None:
    path = tmp_path / "socialplus.toml"
    path.write_text('[logging]\nlevel = "LOUD"\n')

    with pytest.raises(ValueError):
        load_config(path)


class TestCredentials:
    def test_unset(self, monkeypatch) -> None:
        monkeypatch.delenv("SOCIALPLUS_APPKEY", raising=False)
        monkeypatch.delenv("SOCIALPLUS_TOKEN", raising=False)
        config = SocialPlusConfig()

        assert config.get_appkey() is None
        assert config.get_authorization() is None

    def test_bare_token_gets_bearer_prefix(self, monkeypatch) -> None:
        monkeypatch.setenv("SOCIALPLUS_TOKEN", "abc")

        assert SocialPlusConfig().get_authorization() == "Bearer abc"

    def test_prefixed_token_is_kept(self, monkeypatch) -> None:
        monkeypatch.setenv("SOCIALPLUS_TOKEN", "Bearer abc")

        assert SocialPlusConfig().get_authorization() == "Bearer abc"

    def test_custom_variable_names(self, monkeypatch) -> None:
        monkeypatch.setenv("MY_APP_KEY", "k1")
        config = SocialPlusConfig(auth={"appkey_env": "MY_APP_KEY"})

        assert config.get_appkey() == "k1"

    def test_empty_variable_is_unset(self, monkeypatch) -> None:
        monkeypatch.setenv("SOCIALPLUS_APPKEY", "")

        assert SocialPlusConfig().get_appkey() is None


def test_service_config_strips_slashes() -> None:
    service = ServiceConfig(base_url="https://example.test///", api_version="/v1/")

    assert service.base_url == "https://example.test"
    assert service.api_version == "v1"
