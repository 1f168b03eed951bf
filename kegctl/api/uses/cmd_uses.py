"""Uses command - shows formulae that depend on every given formula."""

import logging
from collections.abc import Iterator

from ..config.KegConfig import KegConfig
from ..StageResult import StageResult
from . import UsesUsesOutput
from .Formula import Formula
from .FormulaRegistry import FormulaRegistry
from .FormulaUnavailableError import FormulaUnavailableError
from .includes_ignores import includes_ignores
from .select_used_dependents import select_used_dependents
from .UnavailableFormula import UnavailableFormula

logger = logging.getLogger(__name__)


def cmd_uses(
    formulae: list[str],
    recursive: bool = False,
    installed: bool = False,
    missing: bool = False,
    eval_all: bool = False,
    include_build: bool = False,
    include_test: bool = False,
    include_optional: bool = False,
    include_implicit: bool = False,
    skip_recommended: bool = False,
) -> StageResult:
    """Show the intersection of dependents of the given formulae.

    Required and recommended dependencies are considered by default.
    ``missing`` and ``skip_recommended`` take precedence over the include flags.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """

        def fail(message: str, warnings: list[str] | None = None) -> None:
            result_obj.result = f"Error: {message}"
            result_obj.output = UsesUsesOutput(
                errors=[message],
                warnings=warnings or [],
                formulae=list(formulae),
                dependents=[],
            ).model_dump(mode="python")
            result_obj.success = False

        if not formulae:
            yield (1.0, "Complete")
            fail("at least one formula is required")
            return
        if installed and missing:
            yield (1.0, "Complete")
            fail("--installed and --missing are mutually exclusive")
            return
        if not installed and not eval_all:
            yield (1.0, "Complete")
            fail("`kegctl uses` needs --installed or --eval-all")
            return

        yield (0.1, "Loading configuration...")
        try:
            config = KegConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            fail(f"Error loading configuration: {e}")
            return
        registry = FormulaRegistry(config.taps_dir, config.cellar_dir)

        yield (0.3, "Resolving formulae...")
        warnings: list[str] = []
        used_formulae_missing = False
        used_formulae: list[Formula | UnavailableFormula]
        try:
            used_formulae = [registry.get(name) for name in formulae]
        except FormulaUnavailableError as e:
            logger.warning(str(e))
            warnings.append(str(e))
            used_formulae_missing = True
            used_formulae = [UnavailableFormula(name=name.lower(), full_name=name.lower()) for name in formulae]

        yield (0.5, "Collecting candidate dependents...")
        includes, ignores = includes_ignores(
            include_build=include_build,
            include_test=include_test,
            include_optional=include_optional,
            include_implicit=include_implicit,
            skip_recommended=skip_recommended,
            missing=missing,
        )
        candidates = registry.installed() if installed else registry.all()
        if missing:
            candidates = [formula for formula in candidates if not formula.installed]
            ignores.remove("satisfied")

        yield (0.7, "Selecting dependents...")
        uses = select_used_dependents(candidates, used_formulae, recursive, includes, ignores, registry)
        dependents = sorted(formula.full_name for formula in uses)

        yield (1.0, "Complete")
        if used_formulae_missing and dependents:
            fail("Missing formulae should not have dependents!", warnings)
            result_obj.output["dependents"] = dependents
            return

        result_obj.result = f"Found {len(dependents)} dependent(s)" if dependents else "No dependents found"
        result_obj.output = UsesUsesOutput(
            errors=[],
            warnings=warnings,
            formulae=list(formulae),
            dependents=dependents,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Finding dependents of {', '.join(formulae)}...",
        progress_callback=do_work,
    )
