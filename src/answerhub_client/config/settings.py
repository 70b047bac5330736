"""
Configuration settings for the AnswerHub client.

Settings are read from environment variables (prefixed with ``ANSWERHUB_``)
or a ``.env`` file, validated by Pydantic. ``ClientConfig`` is the frozen
per-client view of those settings that the transports actually use.
"""

import base64
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

API_PREFIX = "services/v2/"


class Settings(BaseSettings):
    """
    AnswerHub client configuration settings.

    All settings can be overridden via environment variables.
    """

    # AnswerHub API Configuration
    base_url: str = Field(
        default="http://localhost:8080/",
        description="Base URL of the AnswerHub site"
    )
    username: str = Field(
        default="",
        description="Username used for Basic authentication"
    )
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Password used for Basic authentication"
    )
    timeout: Optional[float] = Field(
        default=None,
        description="Request timeout in seconds (None uses the HTTP library default)"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable loguru backtraces and variable diagnosis"
    )

    model_config = SettingsConfigDict(
        env_prefix="ANSWERHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Configured settings instance
    """
    return Settings()


def normalize_base_url(url: str) -> str:
    """Return ``url`` with exactly one trailing ``/`` appended when missing."""
    return url if url.endswith("/") else url + "/"


def basic_auth_header(username: str, password: str) -> str:
    """
    Build the ``Authorization`` header value for Basic authentication.

    The credentials are encoded as Latin-1 so every code point below 256 maps
    to a single byte, matching the platform's 8-bit "binary" expectation.
    Credentials containing wider characters fall back to UTF-8.
    """
    credentials = f"{username}:{password}"
    try:
        raw = credentials.encode("latin-1")
    except UnicodeEncodeError:
        raw = credentials.encode("utf-8")
    return f"Basic {base64.b64encode(raw).decode('ascii')}"


class ClientConfig(BaseModel):
    """Immutable connection settings bound to a single client instance."""

    base_url: str
    authorization: str
    timeout: Optional[float] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def create(
        cls,
        base_url: str,
        username: str,
        password: str,
        timeout: Optional[float] = None,
    ) -> "ClientConfig":
        return cls(
            base_url=normalize_base_url(base_url),
            authorization=basic_auth_header(username, password),
            timeout=timeout,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ClientConfig":
        settings = settings or get_settings()
        return cls.create(
            settings.base_url,
            settings.username,
            settings.password.get_secret_value(),
            timeout=settings.timeout,
        )

    def url_for(self, path: str) -> str:
        """Absolute URL of an API path relative to ``services/v2/``."""
        return f"{self.base_url}{API_PREFIX}{path}"

    @property
    def headers(self) -> dict:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": self.authorization,
        }
