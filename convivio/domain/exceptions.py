"""Base exception classes for the Convivio domain layer."""


class ConvivioError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application:
    callers can catch ``ConvivioError`` to re-present the unchanged
    state without caring about the specific failure.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
