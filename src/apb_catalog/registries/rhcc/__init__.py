"""RHCC registry - APB discovery through the v1 search and manifest APIs."""

from apb_catalog.registries.rhcc.client import RegistryClient, normalize_url
from apb_catalog.registries.rhcc.manifest import decode_manifest, fetch_image_config
from apb_catalog.registries.rhcc.models import (
    ImageConfig,
    ImageLabels,
    ImageSummary,
    SearchResult,
)
from apb_catalog.registries.rhcc.outcomes import (
    ImageOutcome,
    ImageSkipped,
    Produced,
    Skipped,
    SkipStage,
)
from apb_catalog.registries.rhcc.registry import APB_QUERY, RHCCRegistry
from apb_catalog.registries.rhcc.search import search_images
from apb_catalog.registries.rhcc.spec import extract_spec

__all__ = [
    "APB_QUERY",
    "ImageConfig",
    "ImageLabels",
    "ImageOutcome",
    "ImageSkipped",
    "ImageSummary",
    "Produced",
    "RHCCRegistry",
    "RegistryClient",
    "SearchResult",
    "SkipStage",
    "Skipped",
    "decode_manifest",
    "extract_spec",
    "fetch_image_config",
    "normalize_url",
    "search_images",
]
