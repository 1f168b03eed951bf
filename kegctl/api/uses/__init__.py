"""Uses module - formulae depending on a set of formulae."""

from .._output_schemas.uses import UsesUsesOutput
from .Dependency import Dependency
from .Formula import Formula
from .FormulaRegistry import FormulaRegistry
from .FormulaUnavailableError import FormulaUnavailableError
from .includes_ignores import includes_ignores
from .select_used_dependents import select_used_dependents

__all__ = [
    "Dependency",
    "Formula",
    "FormulaRegistry",
    "FormulaUnavailableError",
    "UsesUsesOutput",
    "includes_ignores",
    "select_used_dependents",
]
