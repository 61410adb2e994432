"""Red Hat Container Catalog registry adapter."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from apb_catalog.registries.base import Registry
from apb_catalog.registries.rhcc.client import RegistryClient
from apb_catalog.registries.rhcc.manifest import fetch_image_config
from apb_catalog.registries.rhcc.models import ImageSummary, SearchResult
from apb_catalog.registries.rhcc.outcomes import ImageOutcome, ImageSkipped, Produced, Skipped
from apb_catalog.registries.rhcc.search import search_images
from apb_catalog.registries.rhcc.spec import extract_spec

if TYPE_CHECKING:
    import httpx

    from apb_catalog.config import RegistryConfig
    from apb_catalog.models.spec import Spec

logger = logging.getLogger(__name__)

# Quoted so the registry treats the wildcard literally
APB_QUERY = '"*-apb"'


class RHCCRegistry(Registry):
    """Loads APB specs from a registry exposing the v1 search API.

    Images are processed one at a time in search order. An image that
    fails at any stage is logged and left out; only a failed search
    is an error.
    """

    def __init__(self, config: RegistryConfig, http_client: httpx.Client) -> None:
        super().__init__(config)
        self._client = RegistryClient(config.url, http_client)
        logger.debug(f"Initialized RHCC registry '{self.name}' at {self._client.base_url}")

    @property
    def client(self) -> RegistryClient:
        """Underlying registry client."""
        return self._client

    def load_specs(self) -> tuple[list[Spec], int]:
        """Load the specs of every APB image in the registry.

        Returns:
            Tuple of (specs in search order, num_results reported by the search)

        Raises:
            RegistryError: If the image search fails
        """
        image_list = self.load_images(APB_QUERY)

        num_results = image_list.num_results
        logger.debug(f"Found {num_results} images in registry '{self.name}'")
        if num_results > len(image_list.results):
            logger.warning(
                f"Registry '{self.name}' reported {num_results} images but returned "
                f"{len(image_list.results)}; only the first page is loaded"
            )

        specs = [
            outcome.spec
            for outcome in self.iter_outcomes(image_list.results)
            if isinstance(outcome, Produced)
        ]
        return specs, num_results

    def load_images(self, query: str) -> SearchResult:
        """Search the registry for images matching a query.

        Raises:
            RegistryError: If the search fails or cannot be decoded
        """
        return search_images(self._client, query, registry=self.name)

    def iter_outcomes(self, images: Iterable[ImageSummary]) -> Iterator[ImageOutcome]:
        """Yield the outcome of resolving each image, in order."""
        for image in images:
            yield self.image_to_spec(image)

    def image_to_spec(self, image: ImageSummary) -> ImageOutcome:
        """Resolve one image into a spec.

        Never raises for per-image failures; they come back as ``Skipped``.
        """
        try:
            config = fetch_image_config(self._client, image.name)
            if config.labels.version:
                logger.debug(
                    f"Image [{image.name}] carries APB label version {config.labels.version}"
                )
            spec = extract_spec(config.encoded_spec)
        except ImageSkipped as e:
            logger.info(f"{e.reason}. Skipping image [{image.name}] at stage {e.stage.value}.")
            return Skipped(image_name=image.name, stage=e.stage, reason=e.reason)

        logger.debug(f"Successfully converted image [{image.name}] into spec [{spec.name}]")
        return Produced(image_name=image.name, spec=spec)
