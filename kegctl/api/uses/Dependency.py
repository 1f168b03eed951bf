"""Dependency of a formula."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEPENDENCY_TAGS = ("build", "test", "optional", "recommended", "implicit")


class Dependency(BaseModel):
    """A named dependency with its tags.

    A name containing "/" is fully qualified as user/repo/formula.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Formula name, optionally fully qualified")
    tags: tuple[str, ...] = Field((), description="Dependency tags (build, test, optional, recommended, implicit)")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("dependency name is required")
        return v.strip()

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        unknown = [tag for tag in v if tag not in DEPENDENCY_TAGS]
        if unknown:
            raise ValueError(f"Unknown dependency tag(s) {unknown} (supported: {list(DEPENDENCY_TAGS)})")
        return v

    @property
    def short_name(self) -> str:
        return self.name.rsplit("/", 1)[-1]

    @property
    def build(self) -> bool:
        return "build" in self.tags

    @property
    def test(self) -> bool:
        return "test" in self.tags

    @property
    def optional(self) -> bool:
        return "optional" in self.tags

    @property
    def recommended(self) -> bool:
        return "recommended" in self.tags

    @property
    def implicit(self) -> bool:
        return "implicit" in self.tags

    @property
    def required(self) -> bool:
        return not (self.build or self.test or self.optional or self.recommended)
