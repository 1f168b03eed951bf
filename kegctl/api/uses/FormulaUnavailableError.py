"""Formula lookup error."""


class FormulaUnavailableError(LookupError):
    """Raised when no tap defines the requested formula."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No available formula with the name {name!r}")
