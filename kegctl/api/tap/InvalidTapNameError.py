"""Invalid tap name error."""


class InvalidTapNameError(ValueError):
    """Raised when a tap name is not of the form user/repo."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid tap name {name!r}: expected 'user/repo'")
