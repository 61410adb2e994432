"""Exception hierarchy for APB Catalog."""


class APBCatalogError(Exception):
    """Base exception for APB Catalog errors."""


class ConfigurationError(APBCatalogError):
    """Raised when the registry configuration cannot be used."""


class RegistryError(APBCatalogError):
    """Raised when a registry cannot be queried.

    Only the image search is fatal; per-image failures are skipped
    and never surface as this error.
    """

    def __init__(self, message: str, registry: str | None = None, url: str | None = None) -> None:
        self.registry = registry
        self.url = url
        if registry:
            message = f"Registry '{registry}': {message}"
        super().__init__(message)
