"""Process table query error."""


class ProcessQueryError(RuntimeError):
    """Raised when the process listing utility cannot be run or times out."""
