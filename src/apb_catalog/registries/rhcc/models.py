"""Pydantic models for the RHCC registry wire format."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

SPEC_LABEL = "com.redhat.apb.spec"
VERSION_LABEL = "com.redhat.apb.version"


class ImageSummary(BaseModel):
    """One image row returned by the registry search API."""

    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="Repository name of the image")
    description: str = Field("", description="Image description")
    is_official: bool = Field(False, description="Whether the image is official")
    is_trusted: bool = Field(False, description="Whether the image is trusted")
    should_filter: bool = Field(False, description="Whether clients should hide the image")
    star_count: int = Field(0, description="Popularity count")

    @field_validator("name", "description", mode="before")
    @classmethod
    def _null_text(cls, value: str | None) -> str:
        return value or ""

    @field_validator("is_official", "is_trusted", "should_filter", mode="before")
    @classmethod
    def _null_flag(cls, value: bool | None) -> bool:
        return value or False

    @field_validator("star_count", mode="before")
    @classmethod
    def _null_star_count(cls, value: int | None) -> int:
        return value or 0


class SearchResult(BaseModel):
    """Search API response.

    ``num_results`` is the registry's total match count and may be larger
    than the number of summaries returned in ``results``.
    """

    model_config = ConfigDict(frozen=True)

    num_results: int = Field(0, description="Total number of matching images")
    query: str = Field("", description="Query echoed back by the registry")
    results: list[ImageSummary] = Field(default_factory=list, description="Returned images")

    @field_validator("num_results", mode="before")
    @classmethod
    def _null_num_results(cls, value: int | None) -> int:
        return value or 0

    @field_validator("query", mode="before")
    @classmethod
    def _null_query(cls, value: str | None) -> str:
        return value or ""

    @field_validator("results", mode="before")
    @classmethod
    def _null_results(cls, value: list | None) -> list:
        return value or []


class ManifestV1(BaseModel):
    """Outer layer of a schema v1 image manifest.

    Each history entry maps string keys to string values; the
    ``v1Compatibility`` value is itself a JSON document.
    """

    history: list[dict[str, str]] | None = Field(None, description="Legacy history entries")


class ImageLabels(BaseModel):
    """The APB labels of an image config; other labels are ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    spec: str = Field("", alias=SPEC_LABEL, description="Base64-encoded spec document")
    version: str = Field("", alias=VERSION_LABEL, description="APB label version")

    @field_validator("spec", "version", mode="before")
    @classmethod
    def _null_label(cls, value: str | None) -> str:
        return value or ""


class ContainerConfig(BaseModel):
    """The ``config`` block of a v1Compatibility document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    labels: ImageLabels = Field(default_factory=ImageLabels, alias="Labels")

    @field_validator("labels", mode="before")
    @classmethod
    def _null_labels(cls, value: dict | None) -> dict | ImageLabels:
        return value if value is not None else {}


class V1Compatibility(BaseModel):
    """The JSON document stored as a string in ``history[0].v1Compatibility``."""

    config: ContainerConfig | None = Field(None, description="Container configuration")


class ImageConfig(BaseModel):
    """Container configuration recovered from an image manifest."""

    model_config = ConfigDict(frozen=True)

    image_name: str = Field(..., description="Image the config was read from")
    labels: ImageLabels = Field(default_factory=ImageLabels)

    @property
    def encoded_spec(self) -> str:
        """The base64 spec label, empty when the image is not an APB."""
        return self.labels.spec
