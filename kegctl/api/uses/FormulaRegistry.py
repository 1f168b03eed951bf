"""Formula registry - formula definitions from taps and install state from the Cellar."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..tap.TapRegistry import TapRegistry
from .Formula import Formula
from .FormulaUnavailableError import FormulaUnavailableError

logger = logging.getLogger(__name__)


class FormulaRegistry:
    """Read-only view of formulae.

    Definitions are JSON files at <taps_dir>/<user>/homebrew-<repo>/Formula/<name>.json
    holding ``{"deps": [{"name": ..., "tags": [...]}]}``. A formula counts as installed
    when <cellar_dir>/<name> holds at least one version directory.
    """

    def __init__(self, taps_dir: Path, cellar_dir: Path):
        self.taps_dir = taps_dir
        self.cellar_dir = cellar_dir
        self._formulae: list[Formula] | None = None

    def all(self) -> list[Formula]:
        """Every formula of every installed tap, sorted by full name."""
        if self._formulae is None:
            self._formulae = sorted(self._load_all(), key=lambda f: f.full_name)
        return list(self._formulae)

    def installed(self) -> list[Formula]:
        return [formula for formula in self.all() if formula.installed]

    def get(self, name: str) -> Formula:
        """Look up a formula by short name or by user/repo/name.

        Raises:
            FormulaUnavailableError: If no tap defines it
        """
        key = name.lower()
        for formula in self.all():
            if "/" in key:
                if formula.full_name == key:
                    return formula
            elif formula.name == key:
                return formula
        raise FormulaUnavailableError(name)

    def is_installed(self, name: str) -> bool:
        rack = self.cellar_dir / name.rsplit("/", 1)[-1]
        if not rack.is_dir():
            return False
        return any(child.is_dir() for child in rack.iterdir())

    def _load_all(self) -> list[Formula]:
        formulae = []
        for tap in TapRegistry(self.taps_dir).installed():
            formula_dir = tap.path(self.taps_dir) / "Formula"
            if not formula_dir.is_dir():
                continue
            for formula_file in sorted(formula_dir.glob("*.json")):
                formula = self._load_file(formula_file, tap.name)
                if formula is not None:
                    formulae.append(formula)
        return formulae

    def _load_file(self, path: Path, tap_name: str) -> Formula | None:
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logger.warning(f"Skipping formula {path}: invalid JSON: {e}")
            return None
        if not isinstance(raw, dict):
            logger.warning(f"Skipping formula {path}: expected a JSON object")
            return None

        name = path.stem.lower()
        try:
            return Formula(
                name=name,
                tap=tap_name,
                deps=raw.get("deps", []),
                installed=self.is_installed(name),
            )
        except ValidationError as e:
            logger.warning(f"Skipping formula {path}: {e}")
            return None
