"""Registry adapters that turn APB images into specs."""

from apb_catalog.registries.base import Registry
from apb_catalog.registries.factory import create_http_client, create_registry

__all__ = [
    "Registry",
    "create_http_client",
    "create_registry",
]
