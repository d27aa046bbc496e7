"""Custom exception hierarchy for authorfocus."""

from typing import Any


class AuthorFocusError(Exception):
    """Base exception for all authorfocus errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class StoreUnavailableError(AuthorFocusError):
    """The catalog store could not be reached or queried."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.operation = operation
