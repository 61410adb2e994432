"""Spec extraction from the APB image label."""

from __future__ import annotations

import base64
import binascii

import yaml
from pydantic import ValidationError

from apb_catalog.models.spec import Spec
from apb_catalog.registries.rhcc.outcomes import ImageSkipped, SkipStage


def extract_spec(encoded_label: str) -> Spec:
    """Decode a base64 spec label into a Spec.

    Args:
        encoded_label: Value of the ``com.redhat.apb.spec`` label

    Returns:
        Spec decoded from the embedded YAML document

    Raises:
        ImageSkipped: If the label is empty, is not valid base64, or does
            not hold a YAML mapping that validates as a Spec
    """
    if not encoded_label:
        raise ImageSkipped(
            SkipStage.NO_SPEC_LABEL,
            "Didn't find encoded spec label, assuming image is not an APB",
        )

    try:
        decoded = base64.b64decode(encoded_label, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageSkipped(
            SkipStage.BASE64, f"Something went wrong decoding spec from label: {e}"
        ) from e

    try:
        document = yaml.safe_load(decoded)
    except yaml.YAMLError as e:
        raise ImageSkipped(
            SkipStage.SPEC_DOCUMENT, f"Something went wrong loading decoded spec yaml: {e}"
        ) from e

    if not isinstance(document, dict):
        kind = "empty" if document is None else type(document).__name__
        raise ImageSkipped(
            SkipStage.SPEC_DOCUMENT, f"Decoded spec yaml is not a mapping (got {kind})"
        )

    try:
        return Spec.model_validate(document)
    except ValidationError as e:
        raise ImageSkipped(
            SkipStage.SPEC_DOCUMENT, f"Decoded spec yaml is not a valid spec: {e}"
        ) from e
