"""Output schemas for uses commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class UsesUsesOutput(BaseOutputSchema):
    """Output schema for uses command."""
    formulae: list[str] = Field(..., description="Formulae that were queried")
    dependents: list[str] = Field(..., description="Full names of dependents using all queried formulae, sorted")


schema_registry.register_output_schema("uses", "uses", UsesUsesOutput)
