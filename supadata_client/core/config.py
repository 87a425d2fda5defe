"""Client configuration: defaults, environment loading and option functions."""

from collections.abc import Callable
from dataclasses import dataclass, field, replace

import httpx
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_URL = "https://api.supadata.ai/v1"
DEFAULT_TIMEOUT_S = 60.0


class EnvSettings(BaseSettings):
    """Values read from the environment when the client is created."""

    model_config = SettingsConfigDict(
        env_prefix="SUPADATA_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="API key sent in the x-api-key header")


def _default_http_client() -> httpx.Client:
    return httpx.Client(timeout=DEFAULT_TIMEOUT_S)


@dataclass(frozen=True)
class SupadataConfig:
    """Configuration shared by every request a client makes.

    No validation happens here. An empty API key is accepted and surfaces
    later as an ``unauthorized`` error from the API; a malformed base URL
    surfaces as a RequestBuildError when the first request is built.

    Args:
        api_key: Value of the x-api-key header
        base_url: Base URL the endpoint paths are appended to
        http_client: Transport used to send requests; owns the timeout
        owns_client: Whether http_client was created here rather than passed in
    """

    api_key: str = ""
    base_url: str = BASE_URL
    http_client: httpx.Client = field(default_factory=_default_http_client)
    owns_client: bool = True

    @property
    def timeout(self) -> httpx.Timeout:
        """Timeout currently configured on the transport."""
        return self.http_client.timeout


Option = Callable[[SupadataConfig], SupadataConfig]


def default_config() -> SupadataConfig:
    """Return the default configuration, with the API key taken from SUPADATA_API_KEY."""
    return SupadataConfig(api_key=EnvSettings().api_key)


def build_config(*options: Option) -> SupadataConfig:
    """Apply options in order over the default configuration.

    Later options win when they touch the same field.
    """
    config = default_config()
    for option in options:
        config = option(config)
    return config


def with_api_key(api_key: str) -> Option:
    """Set the API key, overriding the environment."""

    def apply(config: SupadataConfig) -> SupadataConfig:
        return replace(config, api_key=api_key)

    return apply


def with_timeout(timeout_s: float) -> Option:
    """Set the timeout on the transport held by the configuration at this point."""

    def apply(config: SupadataConfig) -> SupadataConfig:
        config.http_client.timeout = httpx.Timeout(timeout_s)
        return config

    return apply


def with_client(http_client: httpx.Client) -> Option:
    """Replace the transport entirely.

    A transport the configuration created itself is closed on the way out;
    one passed in by an earlier with_client is left to its owner.
    """

    def apply(config: SupadataConfig) -> SupadataConfig:
        if config.owns_client:
            config.http_client.close()
        return replace(config, http_client=http_client, owns_client=False)

    return apply


def with_base_url(base_url: str) -> Option:
    def apply(config: SupadataConfig) -> SupadataConfig:
        return replace(config, base_url=base_url)

    return apply
