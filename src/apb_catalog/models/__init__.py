"""Pydantic models shared across registry adapters."""

from apb_catalog.models.spec import ParameterDescriptor, Plan, Spec

__all__ = [
    "ParameterDescriptor",
    "Plan",
    "Spec",
]
