"""Tap custom remote error."""


class TapNoCustomRemoteError(ValueError):
    """Raised when --custom-remote is requested without a remote URL."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tap {name} requires a remote URL when --custom-remote is given")
