"""
Base exception classes for the category manager.
"""


class CategoryAppError(Exception):
    """
    Base exception for all category manager errors.

    Attributes:
        message: Human-readable error message
        details: Optional dict with additional context (ids, names)
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if self.details:
            details_str = ', '.join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.__class__.__name__}('{self.message}', {details_str})"
        return f"{self.__class__.__name__}('{self.message}')"


class InstanceNotFoundError(CategoryAppError):
    """Raised when an identifier does not resolve to a stored record."""

    def __init__(self, model_name: str, id_key: int):
        super().__init__(
            f"{model_name} not found with id: {id_key}",
            details={"model": model_name, "id": id_key},
        )
        self.id_key = id_key


class ConstraintViolationError(CategoryAppError):
    """Raised when a write breaks a database constraint (unique or not-null)."""


class InvalidArgumentError(CategoryAppError):
    """Raised on invalid input, e.g. a blank name or a missing mapper argument."""
