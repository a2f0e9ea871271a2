"""Errors raised when a domain rule is broken."""


class DomainError(Exception):
    """Root of the domain error hierarchy; carries a message and optional details."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return f"{self.message} - {self.details}" if self.details else self.message


class ValidationError(DomainError):
    """An entity field failed its checks, e.g. a blank deck name."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        self.field = field
        self.value = value
        details = {
            key: item for key, item in (("field", field), ("value", value)) if item is not None
        }
        super().__init__(message, details)


class InvalidStudySessionError(DomainError):
    """A study session was started or driven in a way it cannot support."""
