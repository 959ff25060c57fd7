"""Exceptions raised by the distributions."""


class BadParamsError(ValueError):
    """Raised when a distribution is constructed with invalid parameters."""

    def __init__(self, message: str = "invalid distribution parameters") -> None:
        super().__init__(message)