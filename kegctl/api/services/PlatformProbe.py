"""Platform probe - detects the init system and privilege context of the process."""

import logging
import os
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from pathlib import Path

from .InitSystem import InitSystem
from .MissingEnvironmentVariable import MissingEnvironmentVariable
from .PrivilegeLevel import PrivilegeLevel
from .ProcessQueryError import ProcessQueryError

logger = logging.getLogger(__name__)

# Reported on platforms without effective UIDs; never root
NO_UID = -1


class PlatformProbe(ABC):
    """Abstract base class for platform-specific probes.

    One concrete variant exists per OS family (see ``detect_probe``). Every
    answer is recomputed from the injected environment on each call.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        geteuid: Callable[[], int] | None = None,
        process_query_timeout: float = 5.0,
    ):
        """Initialize probe.

        Args:
            environ: Environment variables to read HOME and USER from. Defaults to os.environ.
            geteuid: Effective UID provider. Defaults to os.geteuid where the OS has one.
            process_query_timeout: Seconds to wait for the process table query
        """
        self.environ: Mapping[str, str] = os.environ if environ is None else environ
        self._geteuid = geteuid
        self.process_query_timeout = process_query_timeout

    @abstractmethod
    def launchctl_path(self) -> Path | None:
        """Location of launchctl, or None when the OS has no launchd."""
        pass

    @abstractmethod
    def has_systemd(self) -> bool:
        """Whether the OS was booted with systemd."""
        pass

    def has_launchctl(self) -> bool:
        return self.launchctl_path() is not None

    def init_system(self) -> InitSystem:
        """Active init system. launchd takes precedence over systemd."""
        if self.has_launchctl():
            return InitSystem.LAUNCHD
        if self.has_systemd():
            return InitSystem.SYSTEMD
        return InitSystem.NONE

    def uid(self) -> int:
        """Effective UID, or NO_UID when the OS has no notion of one."""
        geteuid = self._geteuid or getattr(os, "geteuid", None)
        if geteuid is None:
            return NO_UID
        return geteuid()

    def is_root(self) -> bool:
        return self.uid() == 0

    def privilege(self) -> PrivilegeLevel:
        return PrivilegeLevel.ROOT if self.is_root() else PrivilegeLevel.USER

    def current_user(self) -> str:
        """Login name of the invoking user.

        Raises:
            MissingEnvironmentVariable: If USER is unset and the OS offers no fallback
        """
        user = self.environ.get("USER")
        if user:
            return user
        user = self._login_name()
        if user:
            return user
        raise MissingEnvironmentVariable("USER")

    def _login_name(self) -> str | None:
        """OS fallback for the login name. None when the platform has none."""
        return None

    def user_of_process(self, pid: int | None) -> str | None:
        """Owner of a process.

        Args:
            pid: Process ID to look up, or None for the current user

        Returns:
            User name, or None if the process table has no entry for pid
        """
        if pid is None:
            return self.current_user()

        try:
            output = self._query_process_table(pid)
        except ProcessQueryError as exc:
            logger.warning(f"Process query for pid {pid} failed: {exc}")
            return None

        # Header line first, value second
        lines = output.splitlines()
        if len(lines) < 2:
            return None
        return lines[1].strip() or None

    def _query_process_table(self, pid: int) -> str:
        """Run ps for the USER column of pid and return its stdout."""
        try:
            result = subprocess.run(
                ["ps", "-o", "user", "-p", str(pid)],
                capture_output=True,
                text=True,
                check=False,
                timeout=self.process_query_timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ProcessQueryError(f"ps timed out after {self.process_query_timeout}s") from e
        except OSError as e:
            raise ProcessQueryError(f"Failed to run ps: {e}") from e
        return result.stdout
