"""Tap remote mismatch error."""


class TapRemoteMismatchError(RuntimeError):
    """Raised when a tapped repository is re-tapped with a different remote."""

    def __init__(self, name: str, expected_remote: str, actual_remote: str):
        self.name = name
        self.expected_remote = expected_remote
        self.actual_remote = actual_remote
        super().__init__(
            f"Tap {name} remote mismatch: {actual_remote} != {expected_remote}. "
            "Pass --custom-remote to replace the remote."
        )
