"""Tap registry - taps recorded as directories under <prefix>/Library/Taps."""

import json
import logging
from pathlib import Path

from .Tap import REPO_PREFIX, Tap
from .TapNoCustomRemoteError import TapNoCustomRemoteError
from .TapRemoteMismatchError import TapRemoteMismatchError

logger = logging.getLogger(__name__)

METADATA_FILE = ".kegctl-tap.json"

TAPPED = "tapped"
ALREADY_TAPPED = "already_tapped"
REMOTE_CHANGED = "remote_changed"


class TapRegistry:
    """Filesystem registry of installed taps.

    Cloning the repository is left to git; the registry only records the
    tap directory and its remote.
    """

    def __init__(self, taps_dir: Path):
        self.taps_dir = taps_dir

    def installed(self) -> list[Tap]:
        """Installed taps sorted by name. Mixed-case directories are skipped."""
        if not self.taps_dir.is_dir():
            return []

        taps = []
        for user_dir in self.taps_dir.iterdir():
            if not user_dir.is_dir():
                continue
            for repo_dir in user_dir.iterdir():
                if not repo_dir.is_dir() or not repo_dir.name.startswith(REPO_PREFIX):
                    continue
                repo = repo_dir.name[len(REPO_PREFIX):]
                if not repo:
                    continue
                if user_dir.name != user_dir.name.lower() or repo != repo.lower():
                    # Tap paths are lower-case, so this directory would never resolve
                    logger.warning(f"Skipping tap directory {repo_dir}: tap directories must be lower-case")
                    continue
                taps.append(Tap(user=user_dir.name, repo=repo))
        return sorted(taps, key=lambda tap: tap.name)

    def is_installed(self, tap: Tap) -> bool:
        return tap.path(self.taps_dir).is_dir()

    def remote(self, tap: Tap) -> str | None:
        """Recorded remote of an installed tap, or None if none was recorded."""
        metadata_path = tap.path(self.taps_dir) / METADATA_FILE
        if not metadata_path.exists():
            return None
        try:
            data = json.loads(metadata_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable tap metadata {metadata_path}: {e}")
            return None
        remote = data.get("remote") if isinstance(data, dict) else None
        return remote if isinstance(remote, str) and remote else None

    def install(self, tap: Tap, clone_target: str | None = None, custom_remote: bool = False) -> str:
        """Register a tap.

        Args:
            tap: Tap to register
            clone_target: Remote URL; defaults to the tap's GitHub remote
            custom_remote: Replace the remote of an already installed tap

        Returns:
            TAPPED, ALREADY_TAPPED or REMOTE_CHANGED

        Raises:
            TapNoCustomRemoteError: If custom_remote is set without clone_target
            TapRemoteMismatchError: If the tap is installed with another remote
        """
        if custom_remote and not clone_target:
            raise TapNoCustomRemoteError(tap.name)

        requested = clone_target or tap.default_remote

        if self.is_installed(tap):
            current = self.remote(tap) or tap.default_remote
            if current == requested:
                return ALREADY_TAPPED
            if not custom_remote:
                raise TapRemoteMismatchError(tap.name, requested, current)
            self._write_metadata(tap, requested)
            logger.info(f"Changed remote of {tap.name} from {current} to {requested}")
            return REMOTE_CHANGED

        tap.path(self.taps_dir).mkdir(parents=True, exist_ok=True)
        self._write_metadata(tap, requested)
        logger.info(f"Tapped {tap.name} ({requested})")
        return TAPPED

    def _write_metadata(self, tap: Tap, remote: str) -> None:
        metadata_path = tap.path(self.taps_dir) / METADATA_FILE
        temp_path = metadata_path.with_suffix(metadata_path.suffix + ".tmp")
        temp_path.write_text(json.dumps({"remote": remote}, indent=4), encoding="utf-8")
        temp_path.replace(metadata_path)
