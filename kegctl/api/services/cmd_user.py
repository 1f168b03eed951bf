"""Services user command - reports the user owning a process."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ServicesUserOutput
from ._load_probe import _load_probe
from .MissingEnvironmentVariable import MissingEnvironmentVariable


def cmd_user(pid: int | None = None) -> StageResult:
    """Look up the owner of pid, or the current user when pid is None."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        reported_pid = -1 if pid is None else pid

        yield (0.1, "Loading configuration...")
        try:
            probe = _load_probe()
            yield (0.4, "Querying process owner..." if pid is not None else "Reading current user...")
            user = probe.user_of_process(pid)
        except (ValueError, MissingEnvironmentVariable) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error looking up user: {e}"
            result_obj.output = ServicesUserOutput(
                errors=[str(e)],
                warnings=[],
                pid=reported_pid,
                user="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if user is None:
            result_obj.result = f"Error: no process with PID {pid}"
            result_obj.output = ServicesUserOutput(
                errors=[f"no process with PID {pid}"],
                warnings=[],
                pid=reported_pid,
                user="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        result_obj.result = f"User resolved: {user}"
        result_obj.output = ServicesUserOutput(
            errors=[],
            warnings=[],
            pid=reported_pid,
            user=user,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Looking up process owner..." if pid is not None else "Looking up current user...",
        progress_callback=do_work,
    )
