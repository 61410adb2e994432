"""Utility functions and helpers for APB Catalog."""

from apb_catalog.utils.errors import (
    APBCatalogError,
    ConfigurationError,
    RegistryError,
)

__all__ = [
    "APBCatalogError",
    "ConfigurationError",
    "RegistryError",
]
