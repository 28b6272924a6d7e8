"""
Exceptions raised by the service layer.
"""


class CustomerApiError(Exception):
    """Base class for errors raised by the customer API."""
    pass


class InvalidArgumentError(CustomerApiError, ValueError):
    """Raised when an operation receives a missing or unusable argument."""

    def __init__(self, argument: str, message: str = "") -> None:
        self.argument = argument
        super().__init__(message or f"Argument '{argument}' must not be empty")
