"""Image manifest decoding.

Registries serving schema v1 manifests nest a second, stringified JSON
document in ``history[0].v1Compatibility``. The container config (and
its labels) only exists inside that inner document, so a manifest is
decoded in two independent passes:

1. The response body into ``ManifestV1``.
2. The first history entry's ``v1Compatibility`` string into
   ``V1Compatibility``.

Schema v2 manifests carry no ``history`` and are not supported.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from apb_catalog.registries.rhcc.client import RegistryClient
from apb_catalog.registries.rhcc.models import ImageConfig, ManifestV1, V1Compatibility
from apb_catalog.registries.rhcc.outcomes import ImageSkipped, SkipStage

logger = logging.getLogger(__name__)

MANIFEST_ACCEPT = "application/json"
V1_COMPATIBILITY_KEY = "v1Compatibility"

# A literal null decodes cleanly and is reported as a missing config
_V1_COMPATIBILITY = TypeAdapter(V1Compatibility | None)


def manifest_path(image_name: str, reference: str = "latest") -> str:
    """Return the registry path of an image's manifest."""
    return f"/v2/{image_name}/manifests/{reference}"


def decode_manifest(body: bytes | str, image_name: str) -> ImageConfig:
    """Decode a schema v1 manifest body into the image's container config.

    Args:
        body: Raw manifest response body
        image_name: Image the manifest belongs to

    Returns:
        ImageConfig carrying the image labels

    Raises:
        ImageSkipped: If either decode pass fails or a layer is missing
    """
    try:
        manifest = ManifestV1.model_validate_json(body)
    except ValidationError as e:
        raise ImageSkipped(
            SkipStage.MANIFEST, f"Error grabbing JSON body from response: {e}"
        ) from e

    if not manifest.history:
        raise ImageSkipped(
            SkipStage.NO_HISTORY, "V1 schema manifest history does not exist in registry"
        )

    v1_compat = manifest.history[0].get(V1_COMPATIBILITY_KEY, "")
    try:
        compat = _V1_COMPATIBILITY.validate_json(v1_compat)
    except ValidationError as e:
        raise ImageSkipped(
            SkipStage.V1_COMPATIBILITY, f"Error unmarshalling intermediary JSON response: {e}"
        ) from e

    if compat is None or compat.config is None:
        raise ImageSkipped(SkipStage.NO_CONFIG, "Did not find v1 manifest in image history")

    return ImageConfig(image_name=image_name, labels=compat.config.labels)


def fetch_image_config(client: RegistryClient, image_name: str) -> ImageConfig:
    """Fetch the latest manifest of an image and decode its container config.

    Args:
        client: Registry client to issue the request with
        image_name: Repository name of the image

    Returns:
        ImageConfig carrying the image labels

    Raises:
        ImageSkipped: If the manifest cannot be fetched or decoded
    """
    path = manifest_path(image_name)
    logger.debug(f"Fetching manifest {path}")
    try:
        request = client.build_request(path, headers={"Accept": MANIFEST_ACCEPT})
    except httpx.InvalidURL as e:
        raise ImageSkipped(SkipStage.REQUEST, f"Could not form request: {e}") from e

    try:
        response = client.send(request)
    except httpx.HTTPError as e:
        raise ImageSkipped(SkipStage.TRANSPORT, f"Could not send request: {e}") from e

    return decode_manifest(response.content, image_name)
