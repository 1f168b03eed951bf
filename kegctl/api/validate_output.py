"""Check a command's output dict against its registered output schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from .schema_registry import schema_registry


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate the output of a kegctl command function.

    The schema is looked up from where the command lives:
    ``kegctl.api.tap.cmd_list.cmd_list`` maps to ``("tap", "list")``. Helpers
    outside ``kegctl.api`` or not named ``cmd_*`` pass through unchanged, as
    do commands without a registered schema.

    Returns:
        The output re-dumped through the schema, defaults filled in

    Raises:
        ValueError: If the output does not match the schema
    """
    module_parts = func.__module__.split(".")
    if module_parts[:2] != ["kegctl", "api"] or len(module_parts) < 3 or not func.__name__.startswith("cmd_"):
        return output

    domain = module_parts[2]
    command_name = func.__name__.removeprefix("cmd_")
    schema_class = schema_registry.get_output_schema(domain, command_name)
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"Output validation failed for `kegctl {domain} {command_name}`: {e}") from e
