"""Configuration settings for the Blnk client.

This module defines the client configuration: the service base URL, the
optional API key, and the retry and timeout policy of the request pipeline.
Settings are loaded from ``BLNK_``-prefixed environment variables and
``.env`` files, or built directly with :func:`default_config`.
"""

from typing import Any, Literal, Optional, Tuple, Type

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from ..exceptions import ConfigurationError

DEFAULT_RETRY_COUNT = 3
DEFAULT_RETRY_DELAY = 2.0
DEFAULT_TIMEOUT = 10.0


def normalize_base_url(value: Optional[str]) -> str:
    """Return ``value`` stripped and guaranteed to end with ``/``.

    :param value: Raw base URL
    :type value: Optional[str]
    :return: Normalized base URL
    :rtype: str
    :raises ValueError: If the URL is empty
    """
    value = (value or "").strip()
    if not value:
        raise ValueError("base url is required")
    if not value.endswith("/"):
        value += "/"
    return value


class ClientConfig(BaseSettings):
    """Client settings loaded from environment variables.

    :param base_url: Base URL of the Blnk service, always ending in ``/``
    :type base_url: str
    :param api_key: Optional API key sent in the ``X-Blnk-Key`` header
    :type api_key: Optional[str]
    :param retry_count: Attempts per request, including the first one
    :type retry_count: int
    :param retry_delay: Seconds to wait between attempts
    :type retry_delay: float
    :param timeout: Per-request timeout in seconds
    :type timeout: float
    :param log_level: Logging level used by :func:`setup_logging`
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    """

    model_config = SettingsConfigDict(
        env_prefix="BLNK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    base_url: str = Field(..., description="Blnk service base URL")
    api_key: Optional[str] = Field(None, description="Blnk API key")
    retry_count: int = Field(
        DEFAULT_RETRY_COUNT, ge=1, description="Attempts per request"
    )
    retry_delay: float = Field(
        DEFAULT_RETRY_DELAY, ge=0, description="Fixed delay between attempts"
    )
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Request timeout")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Reject empty base URLs and append the trailing separator."""
        return normalize_base_url(v)

    @field_validator("api_key")
    @classmethod
    def blank_api_key_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v


class _ArgumentsOnlyConfig(ClientConfig):
    """ClientConfig validated from constructor arguments only."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)


def default_config(base_url: str, **overrides: Any) -> ClientConfig:
    """Build a configuration from defaults and explicit arguments only.

    Unlike :func:`load_config`, neither ``BLNK_*`` environment variables nor
    the ``.env`` file are read, so the result depends on the arguments alone.

    :param base_url: Base URL of the Blnk service
    :type base_url: str
    :param overrides: Any other :class:`ClientConfig` field
    :return: Validated configuration
    :rtype: ClientConfig
    :raises ConfigurationError: If a value is invalid
    """
    try:
        return _ArgumentsOnlyConfig(base_url=base_url, **overrides)
    except ValidationError as e:
        raise _configuration_error(e) from e


def load_config(**values: Any) -> ClientConfig:
    """Load configuration from the environment plus explicit ``values``.

    :raises ConfigurationError: If validation fails
    """
    try:
        return ClientConfig(**values)
    except ValidationError as e:
        raise _configuration_error(e) from e


def _configuration_error(e: ValidationError) -> ConfigurationError:
    first = e.errors()[0] if e.errors() else {}
    setting = ".".join(str(p) for p in first.get("loc", ())) or None
    return ConfigurationError(
        f"invalid client configuration: {first.get('msg', str(e))}",
        setting=setting,
    )
