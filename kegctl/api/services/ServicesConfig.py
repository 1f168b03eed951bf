"""Services configuration with Pydantic validation."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ServicesConfig(BaseModel):
    """Settings for init system probing."""

    model_config = ConfigDict(extra="forbid")

    process_query_timeout: float = Field(
        5.0, description="Seconds to wait for the process table query before giving up"
    )

    @field_validator("process_query_timeout")
    @classmethod
    def validate_process_query_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"services.process_query_timeout must be positive, got: {v!r}")
        return v
