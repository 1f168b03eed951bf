"""Services paths command - reports init system and service definition paths."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ServicesPathsOutput
from ._load_probe import _load_probe
from .domain_target import domain_target
from .InitSystem import InitSystem
from .MissingEnvironmentVariable import MissingEnvironmentVariable
from .ServicePaths import ServicePaths

UNSUPPORTED_MESSAGE = "unsupported platform: no launchd or systemd detected"


def cmd_paths() -> StageResult:
    """Resolve the init system, domain target and service paths."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        try:
            probe = _load_probe()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {e}"
            result_obj.output = _empty_output(errors=[str(e)])
            result_obj.success = False
            return

        yield (0.3, "Detecting init system...")
        init_system = probe.init_system()
        privilege = probe.privilege()
        target = domain_target(probe)

        if init_system is InitSystem.NONE:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {UNSUPPORTED_MESSAGE}"
            result_obj.output = _empty_output(
                errors=[UNSUPPORTED_MESSAGE],
                init_system=init_system.value,
                privilege=privilege.value,
                domain_target=target,
            )
            result_obj.success = False
            return

        yield (0.6, "Resolving service paths...")
        paths = ServicePaths(probe)
        warnings: list[str] = []
        try:
            boot_path = paths.boot_path()
            path = paths.path()
            user_path = _user_path(paths, probe.is_root(), warnings)
        except MissingEnvironmentVariable as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error resolving service paths: {e}"
            result_obj.output = _empty_output(
                errors=[str(e)],
                init_system=init_system.value,
                privilege=privilege.value,
                domain_target=target,
            )
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Service paths resolved ({init_system.value}, {privilege.value}: {path})"
        result_obj.output = ServicesPathsOutput(
            errors=[],
            warnings=warnings,
            init_system=init_system.value,
            privilege=privilege.value,
            domain_target=target,
            boot_path=str(boot_path),
            user_path="" if user_path is None else str(user_path),
            path=str(path),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Resolving service paths...",
        progress_callback=do_work,
    )


def _empty_output(
    errors: list[str],
    init_system: str = "",
    privilege: str = "",
    domain_target: str = "",
) -> dict:
    return ServicesPathsOutput(
        errors=errors,
        warnings=[],
        init_system=init_system,
        privilege=privilege,
        domain_target=domain_target,
        boot_path="",
        user_path="",
        path="",
    ).model_dump(mode="python")


def _user_path(paths: ServicePaths, is_root: bool, warnings: list[str]):
    """Per-user path; root does not need HOME, so a missing HOME only warns."""
    try:
        return paths.user_path()
    except MissingEnvironmentVariable as e:
        if not is_root:
            raise
        warnings.append(f"user path unavailable: {e}")
        return None
