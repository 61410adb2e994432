"""Per-image results of resolving an image into a spec."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from apb_catalog.models.spec import Spec


class SkipStage(str, Enum):
    """Pipeline stage at which an image was skipped."""

    REQUEST = "request"
    TRANSPORT = "transport"
    MANIFEST = "manifest"
    NO_HISTORY = "no_history"
    V1_COMPATIBILITY = "v1_compatibility"
    NO_CONFIG = "no_config"
    NO_SPEC_LABEL = "no_spec_label"
    BASE64 = "base64"
    SPEC_DOCUMENT = "spec_document"


class ImageSkipped(Exception):
    """Raised inside a pipeline stage when an image cannot yield a spec.

    Never escapes the registry; it is turned into a ``Skipped`` outcome.
    """

    def __init__(self, stage: SkipStage, reason: str) -> None:
        self.stage = stage
        self.reason = reason
        super().__init__(f"{stage.value}: {reason}")


@dataclass(frozen=True)
class Produced:
    """An image that yielded a spec."""

    image_name: str
    spec: Spec


@dataclass(frozen=True)
class Skipped:
    """An image that was skipped, with the stage and cause."""

    image_name: str
    stage: SkipStage
    reason: str

    def __str__(self) -> str:
        return f"{self.image_name} skipped at {self.stage.value}: {self.reason}"


ImageOutcome = Union[Produced, Skipped]
