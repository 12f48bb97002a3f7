"""
Configuration loading and validation for socialplus.

Loads socialplus.toml files and validates settings using Pydantic.
Credentials are never stored in the file: it names the environment
variables that hold them.
"""

import os
from pathlib import Path
from typing import Literal

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://api.embeddedsocial.microsoft.com"
DEFAULT_API_VERSION = "v0.7"


class ServiceConfig(BaseModel):
    """Where the service lives and how patiently to talk to it."""

    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: float = Field(default=30.0, gt=0.0, le=600.0)
    max_retries: int = Field(default=3, ge=1, le=10)
    retry_backoff_seconds: float = Field(default=1.0, ge=0.0)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL and strip the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://, got {v!r}")
        return v.rstrip("/")

    @field_validator("api_version")
    @classmethod
    def validate_api_version(cls, v: str) -> str:
        return v.strip("/")


class AuthConfig(BaseModel):
    """Names of the environment variables holding credentials."""

    appkey_env: str = "SOCIALPLUS_APPKEY"
    token_env: str = "SOCIALPLUS_TOKEN"


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Path | None = None


class SocialPlusConfig(BaseModel):
    """Complete client configuration."""

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def api_root(self) -> str:
        """Base URL joined with the API version prefix."""
        if not self.service.api_version:
            return self.service.base_url
        return f"{self.service.base_url}/{self.service.api_version}"

    def get_appkey(self) -> str | None:
        """
        Get the app key from the environment.

        Returns:
            App key, or None if the variable is unset or empty
        """
        return os.environ.get(self.auth.appkey_env) or None

    def get_authorization(self) -> str | None:
        """
        Get the Authorization header value from the environment.

        A bare session token is prefixed with "Bearer ".

        Returns:
            Authorization string, or None if the variable is unset or empty
        """
        token = os.environ.get(self.auth.token_env)
        if not token:
            return None
        if token.startswith("Bearer "):
            return token
        return f"Bearer {token}"


def load_config(config_path: Path) -> SocialPlusConfig:
    """
    Load client configuration from a TOML file.

    Args:
        config_path: Path to socialplus.toml

    Returns:
        Validated SocialPlusConfig

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "rb") as f:
        try:
            config_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    try:
        config = SocialPlusConfig(**config_data)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    return config


def create_default_config(
    output_path: Path,
    base_url: str = DEFAULT_BASE_URL,
    api_version: str = DEFAULT_API_VERSION,
) -> None:
    """
    Write a socialplus.toml configuration file.

    Args:
        output_path: Where to write socialplus.toml
        base_url: Service base URL
        api_version: API version path prefix
    """
    template = f'''[service]
base_url = "{base_url}"
api_version = "{api_version}"  # Prefixed to every operation path
timeout_seconds = 30
max_retries = 3  # Attempts for requests that could not connect

[auth]
appkey_env = "SOCIALPLUS_APPKEY"  # App key for unauthenticated calls
token_env = "SOCIALPLUS_TOKEN"  # Session token ("Bearer " is added if missing)

[logging]
level = "INFO"
'''

    output_path.write_text(template, encoding="utf-8")
