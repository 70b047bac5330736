"""Configuration module for the AnswerHub client."""

from .settings import (
    API_PREFIX,
    ClientConfig,
    Settings,
    basic_auth_header,
    get_settings,
    normalize_base_url,
)

__all__ = [
    "API_PREFIX",
    "ClientConfig",
    "Settings",
    "basic_auth_header",
    "get_settings",
    "normalize_base_url",
]
