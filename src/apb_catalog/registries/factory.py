"""Factory for registry adapters.

Dispatches on RegistryType enum values to instantiate the correct
registry implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from apb_catalog.config import RegistryType
from apb_catalog.utils.errors import ConfigurationError

if TYPE_CHECKING:
    from apb_catalog.config import RegistryConfig
    from apb_catalog.registries.base import Registry


def create_http_client(config: RegistryConfig) -> httpx.Client:
    """Create the HTTP client shared by every request to a registry."""
    return httpx.Client(timeout=httpx.Timeout(config.request_timeout))


def create_registry(config: RegistryConfig, http_client: httpx.Client) -> Registry:
    """Create a registry adapter based on the configured registry type.

    Args:
        config: Registry configuration.
        http_client: Shared HTTP client; the caller owns and closes it.

    Returns:
        A Registry instance for the configured type.

    Raises:
        ConfigurationError: If the registry type is not supported.
    """
    if config.type == RegistryType.RHCC:
        from apb_catalog.registries.rhcc import RHCCRegistry

        return RHCCRegistry(config, http_client)

    raise ConfigurationError(f"Unsupported registry type: {config.type}")
