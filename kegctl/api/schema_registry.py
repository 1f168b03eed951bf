"""Registry of pydantic output schemas keyed by (domain, command).

Modules in ``kegctl.api._output_schemas`` register on import, e.g.
``("services", "paths")`` for ``kegctl services paths``.
"""

from pydantic import BaseModel


class SchemaRegistry:
    def __init__(self) -> None:
        self._schemas: dict[tuple[str, str], type[BaseModel]] = {}

    def register_output_schema(self, domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
        """Raises ValueError when the command already has a schema."""
        key = (domain, command_name)
        if key in self._schemas:
            raise ValueError(f"Output schema for `kegctl {domain} {command_name}` is already registered")
        self._schemas[key] = schema_class

    def get_output_schema(self, domain: str, command_name: str) -> type[BaseModel] | None:
        return self._schemas.get((domain, command_name))


schema_registry = SchemaRegistry()
