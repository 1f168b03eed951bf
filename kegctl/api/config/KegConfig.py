"""Top-level kegctl configuration."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..services.ServicesConfig import ServicesConfig
from .default_prefix import default_prefix

logger = logging.getLogger(__name__)


class KegConfig(BaseModel):
    """Top-level configuration for kegctl."""

    model_config = ConfigDict(extra="forbid")

    prefix: str = Field(default_factory=default_prefix, description="Package-manager prefix")
    services: ServicesConfig = Field(default_factory=ServicesConfig)

    @property
    def prefix_path(self) -> Path:
        return Path(self.prefix).expanduser()

    @property
    def taps_dir(self) -> Path:
        """Directory holding registered taps (<prefix>/Library/Taps)."""
        return self.prefix_path / "Library" / "Taps"

    @property
    def cellar_dir(self) -> Path:
        """Directory holding installed formula kegs (<prefix>/Cellar)."""
        return self.prefix_path / "Cellar"

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get kegctl home directory based on KEGCTL_HOME or default to ~/.kegctl."""
        home_env = os.environ.get("KEGCTL_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".kegctl"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file under the kegctl home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "KegConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            logger.debug(f"No config file at {path}, using defaults")
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must hold a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert KegConfig instance to a dictionary for serialization."""
        return {
            "prefix": self.prefix,
            "services": self.services.model_dump(),
        }
