"""Output schemas for tap commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class TapListOutput(BaseOutputSchema):
    """Output schema for tap list command."""
    taps: list[str] = Field(..., description="Installed tap names sorted by name")


class TapTapOutput(BaseOutputSchema):
    """Output schema for tap command."""
    name: str = Field(..., description="Tap name (user/repo), empty string if invalid")
    path: str = Field(..., description="Tap directory, empty string if invalid")
    remote: str = Field(..., description="Recorded remote URL, empty string if not recorded")
    tapped: bool = Field(..., description="Whether the tap is registered after the command")


schema_registry.register_output_schema("tap", "list", TapListOutput)
schema_registry.register_output_schema("tap", "tap", TapTapOutput)
