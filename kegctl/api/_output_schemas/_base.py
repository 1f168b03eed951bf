"""Fields shared by every kegctl command output."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Common shape of ``StageResult.output``.

    Failures are reported in ``errors`` rather than raised; non-fatal notes
    (an unknown formula, an already tapped repository) go to ``warnings``.
    Unknown keys are rejected so a command cannot drift from its schema.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Reasons the command failed")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal notes, printed to stderr by the CLI")
