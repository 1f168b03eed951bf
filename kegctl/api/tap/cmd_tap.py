"""Tap command - registers a formula repository."""

from collections.abc import Iterator

from ..config.KegConfig import KegConfig
from ..StageResult import StageResult
from . import TapTapOutput
from .InvalidTapNameError import InvalidTapNameError
from .Tap import Tap
from .TapNoCustomRemoteError import TapNoCustomRemoteError
from .TapRegistry import ALREADY_TAPPED, REMOTE_CHANGED, TapRegistry
from .TapRemoteMismatchError import TapRemoteMismatchError


def cmd_tap(name: str, url: str | None = None, custom_remote: bool = False) -> StageResult:
    """Tap a formula repository.

    With url unset the tap's GitHub remote (https://github.com/<user>/homebrew-<repo>) is recorded.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Parsing tap name...")
        try:
            tap = Tap.fetch(name)
        except InvalidTapNameError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = TapTapOutput(
                errors=[str(e)], warnings=[], name="", path="", remote="", tapped=False
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.2, "Loading configuration...")
        try:
            config = KegConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {e}"
            result_obj.output = TapTapOutput(
                errors=[str(e)], warnings=[], name=tap.name, path="", remote="", tapped=False
            ).model_dump(mode="python")
            result_obj.success = False
            return

        registry = TapRegistry(config.taps_dir)
        tap_path = str(tap.path(config.taps_dir))

        yield (0.5, f"Tapping {tap.name}...")
        try:
            outcome = registry.install(tap, clone_target=url, custom_remote=custom_remote)
        except (TapRemoteMismatchError, TapNoCustomRemoteError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = TapTapOutput(
                errors=[str(e)],
                warnings=[],
                name=tap.name,
                path=tap_path,
                remote=registry.remote(tap) or "",
                tapped=registry.is_installed(tap),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        warnings = []
        if outcome == ALREADY_TAPPED:
            warnings.append(f"{tap.name} is already tapped")
            result_obj.result = f"Tap {tap.name} already tapped"
        elif outcome == REMOTE_CHANGED:
            result_obj.result = f"Tap {tap.name} remote changed"
        else:
            result_obj.result = f"Tapped {tap.name}"

        yield (1.0, "Complete")
        result_obj.output = TapTapOutput(
            errors=[],
            warnings=warnings,
            name=tap.name,
            path=tap_path,
            remote=registry.remote(tap) or tap.default_remote,
            tapped=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Tapping {name}...",
        progress_callback=do_work,
    )
