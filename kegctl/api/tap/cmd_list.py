"""Tap list command - lists installed taps."""

from collections.abc import Iterator

from ..config.KegConfig import KegConfig
from ..StageResult import StageResult
from . import TapListOutput
from .TapRegistry import TapRegistry


def cmd_list() -> StageResult:
    """List installed taps sorted by name."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        try:
            config = KegConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {e}"
            result_obj.output = TapListOutput(errors=[str(e)], warnings=[], taps=[]).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, "Scanning taps directory...")
        taps = [tap.name for tap in TapRegistry(config.taps_dir).installed()]

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(taps)} installed tap(s)"
        result_obj.output = TapListOutput(errors=[], warnings=[], taps=taps).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing installed taps...",
        progress_callback=do_work,
    )
