"""Pydantic models for APB specifications.

A spec is the YAML document an APB image embeds (base64-encoded) in its
``com.redhat.apb.spec`` label. Only the well-known keys are typed; any
other keys in the document are kept as extra fields so a decoded spec
always carries the whole document.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ParameterDescriptor(BaseModel):
    """A user-supplied parameter accepted by an APB plan."""

    model_config = ConfigDict(extra="allow", frozen=True, coerce_numbers_to_str=True)

    name: str | None = Field(None, description="Parameter name")
    title: str | None = Field(None, description="Human readable title")
    type: str | None = Field(None, description="Parameter type (string, int, enum, ...)")
    description: str | None = Field(None, description="Parameter description")
    default: Any = Field(None, description="Default value")
    required: bool = Field(False, description="Whether a value must be supplied")
    updatable: bool = Field(False, description="Whether the value can change after provision")
    maxlength: int | None = Field(None, description="Maximum length for string values")
    pattern: str | None = Field(None, description="Validation regex for string values")
    enum: list[Any] | None = Field(None, description="Allowed values for enum parameters")


class Plan(BaseModel):
    """A service plan offered by an APB."""

    model_config = ConfigDict(extra="allow", frozen=True, coerce_numbers_to_str=True)

    name: str | None = Field(None, description="Plan name")
    description: str | None = Field(None, description="Plan description")
    free: bool = Field(False, description="Whether the plan is free of charge")
    bindable: bool = Field(False, description="Whether instances of this plan can be bound")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Display metadata")
    parameters: list[ParameterDescriptor] = Field(
        default_factory=list, description="Parameters accepted by the plan"
    )


class Spec(BaseModel):
    """Automation Playbook Bundle specification.

    ``async`` is a Python keyword, so the field is exposed as
    ``async_`` and read from / written to the ``async`` key.
    """

    model_config = ConfigDict(
        extra="allow", frozen=True, populate_by_name=True, coerce_numbers_to_str=True
    )

    id: str | None = Field(None, description="Spec identifier")
    version: str | None = Field(None, description="APB spec format version")
    name: str | None = Field(None, description="APB name")
    image: str | None = Field(None, description="Image the APB runs from")
    description: str | None = Field(None, description="APB description")
    bindable: bool = Field(False, description="Whether provisioned services can be bound")
    async_: str | None = Field(
        None, alias="async", description="Async support: optional, required or unsupported"
    )
    tags: list[str] = Field(default_factory=list, description="Catalog tags")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Display metadata")
    parameters: list[ParameterDescriptor] = Field(
        default_factory=list, description="Top-level parameters (pre-plan specs)"
    )
    plans: list[Plan] = Field(default_factory=list, description="Service plans")

    def to_document(self) -> dict[str, Any]:
        """Return the spec as a plain document keyed the way it was decoded."""
        return self.model_dump(by_alias=True, exclude_unset=True)
