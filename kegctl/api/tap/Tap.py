"""Tap - a formula repository registered under the prefix."""

import re
from dataclasses import dataclass
from pathlib import Path

from .InvalidTapNameError import InvalidTapNameError

TAP_NAME_PATTERN = re.compile(r"^([\w-]+)/(?:homebrew-)?([\w-]+)$", re.IGNORECASE)
REPO_PREFIX = "homebrew-"


@dataclass(frozen=True, order=True)
class Tap:
    """A tap identified by its GitHub-style user and repository."""

    user: str
    """Lower-case owner of the repository."""

    repo: str
    """Lower-case repository name without the homebrew- prefix."""

    @classmethod
    def fetch(cls, name: str) -> "Tap":
        """Parse "user/repo" or "user/homebrew-repo".

        Raises:
            InvalidTapNameError: If name does not match user/repo
        """
        match = TAP_NAME_PATTERN.match(name.strip())
        if not match:
            raise InvalidTapNameError(name)
        return cls(user=match.group(1).lower(), repo=match.group(2).lower())

    @property
    def name(self) -> str:
        return f"{self.user}/{self.repo}"

    @property
    def repo_dir_name(self) -> str:
        return f"{REPO_PREFIX}{self.repo}"

    @property
    def default_remote(self) -> str:
        """GitHub HTTPS remote used when no URL is given."""
        return f"https://github.com/{self.user}/{self.repo_dir_name}"

    def path(self, taps_dir: Path) -> Path:
        return taps_dir / self.user / self.repo_dir_name

    def __str__(self) -> str:
        return self.name
