"""Input validation errors."""

from __future__ import annotations

from convivio.domain.exceptions import ConvivioError


class ValidationError(ConvivioError):
    """Raised when an operation receives input it cannot accept.

    Examples:
        - a comment whose text is empty once trimmed
        - a zero-quantity wine handed to the service planner

    The operation has not applied any effect.

    Attributes:
        field: Name of the offending input.
        detail: Why it was rejected.
    """

    def __init__(self, field: str, detail: str) -> None:
        self.field = field
        self.detail = detail
        super().__init__(f"Invalid {field}: {detail}")
