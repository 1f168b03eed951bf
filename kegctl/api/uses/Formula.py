"""Formula definition loaded from a tap."""

from pydantic import BaseModel, ConfigDict, Field

from .Dependency import Dependency


class Formula(BaseModel):
    """A formula and its declared dependencies."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Short formula name")
    tap: str | None = Field(None, description="Tap name (user/repo) defining the formula")
    deps: tuple[Dependency, ...] = Field((), description="Declared dependencies")
    installed: bool = Field(False, description="Whether any version is installed in the Cellar")

    @property
    def full_name(self) -> str:
        return f"{self.tap}/{self.name}" if self.tap else self.name
