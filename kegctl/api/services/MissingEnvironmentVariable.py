"""Missing environment variable error."""


class MissingEnvironmentVariable(EnvironmentError):
    """Raised when a required environment variable is unset."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Environment variable {name} is not set")
