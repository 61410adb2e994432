"""Base class for registry adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apb_catalog.config import RegistryConfig
    from apb_catalog.models.spec import Spec


class Registry(ABC):
    """A source of APB specs.

    Each adapter knows how to find APB images in one kind of registry
    and decode them into specs.
    """

    def __init__(self, config: RegistryConfig) -> None:
        self._config = config

    @property
    def config(self) -> RegistryConfig:
        """Registry configuration."""
        return self._config

    @property
    def name(self) -> str:
        """Configured registry name."""
        return self._config.name

    @abstractmethod
    def load_specs(self) -> tuple[list[Spec], int]:
        """Load all APB specs available in the registry.

        Returns:
            Tuple of (specs in search order, total images matched by the registry)

        Raises:
            RegistryError: If the registry cannot be searched
        """
