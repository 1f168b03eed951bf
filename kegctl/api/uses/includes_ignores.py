"""Dependency predicates to include and ignore when selecting dependents."""


def includes_ignores(
    include_build: bool = False,
    include_test: bool = False,
    include_optional: bool = False,
    include_implicit: bool = False,
    skip_recommended: bool = False,
    missing: bool = False,
) -> tuple[list[str], list[str]]:
    """Build (includes, ignores) predicate name lists.

    Required and recommended dependencies are included by default.
    """
    includes = ["required", "recommended"]
    if include_implicit:
        includes.append("implicit")
    if include_build:
        includes.append("build")
    if include_test:
        includes.append("test")
    if include_optional:
        includes.append("optional")

    ignores = []
    if skip_recommended:
        ignores.append("recommended")
    if missing:
        ignores.append("satisfied")

    return includes, ignores
