"""Output schemas for services commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ServicesPathsOutput(BaseOutputSchema):
    """Output schema for services paths command.

    Paths are empty strings when no supported init system was detected.
    """
    init_system: str = Field(..., description="Active init system: 'launchd', 'systemd' or 'none'")
    privilege: str = Field(..., description="Privilege level: 'root' or 'user'")
    domain_target: str = Field(..., description="Init system domain: 'system' or 'gui/<uid>'")
    boot_path: str = Field(..., description="System-wide service definition directory")
    user_path: str = Field(..., description="Per-user service definition directory")
    path: str = Field(..., description="Directory used at the current privilege level")


class ServicesUserOutput(BaseOutputSchema):
    """Output schema for services user command."""
    pid: int = Field(..., description="Queried process ID, -1 for the current process owner")
    user: str = Field(..., description="Owning user name, empty string if unknown")


schema_registry.register_output_schema("services", "paths", ServicesPathsOutput)
schema_registry.register_output_schema("services", "user", ServicesUserOutput)
