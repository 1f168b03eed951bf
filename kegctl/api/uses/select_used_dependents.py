"""Select dependents that use every one of a set of formulae."""

from collections.abc import Iterable, Sequence

from .Dependency import Dependency
from .Formula import Formula
from .FormulaRegistry import FormulaRegistry
from .FormulaUnavailableError import FormulaUnavailableError
from .UnavailableFormula import UnavailableFormula


def _check(dep: Dependency, predicate: str, registry: FormulaRegistry) -> bool:
    if predicate == "satisfied":
        return registry.is_installed(dep.short_name)
    return getattr(dep, predicate)


def _kept(dep: Dependency, includes: Sequence[str], ignores: Sequence[str], registry: FormulaRegistry) -> bool:
    if any(_check(dep, ignore, registry) for ignore in ignores):
        return False
    return any(_check(dep, include, registry) for include in includes)


def select_includes(
    deps: Iterable[Dependency],
    includes: Sequence[str],
    ignores: Sequence[str],
    registry: FormulaRegistry,
) -> list[Dependency]:
    """Direct dependencies not ignored and matching an include predicate."""
    return [dep for dep in deps if _kept(dep, includes, ignores, registry)]


def recursive_dep_includes(
    formula: Formula,
    includes: Sequence[str],
    ignores: Sequence[str],
    registry: FormulaRegistry,
) -> list[Dependency]:
    """Transitive dependencies, pruning the subtree of every dependency that is not kept.

    Dependencies no tap defines are kept but not expanded.
    """
    result: list[Dependency] = []
    seen: set[str] = set()
    stack = list(reversed(formula.deps))
    while stack:
        dep = stack.pop()
        if dep.name in seen or not _kept(dep, includes, ignores, registry):
            continue
        seen.add(dep.name)
        result.append(dep)
        try:
            child = registry.get(dep.name)
        except FormulaUnavailableError:
            continue
        stack.extend(reversed(child.deps))
    return result


def _uses(dep: Dependency, used: Formula | UnavailableFormula) -> bool:
    # Fully qualified dependencies must match the full name
    if "/" in dep.name:
        return dep.name == used.full_name
    return dep.name == used.name


def select_used_dependents(
    dependents: Iterable[Formula],
    used_formulae: Sequence[Formula | UnavailableFormula],
    recursive: bool,
    includes: Sequence[str],
    ignores: Sequence[str],
    registry: FormulaRegistry,
) -> list[Formula]:
    """Dependents whose dependencies include every formula in used_formulae."""
    selected = []
    for dependent in dependents:
        if recursive:
            deps = recursive_dep_includes(dependent, includes, ignores, registry)
        else:
            deps = select_includes(dependent.deps, includes, ignores, registry)

        if all(any(_uses(dep, used) for dep in deps) for used in used_formulae):
            selected.append(dependent)
    return selected
