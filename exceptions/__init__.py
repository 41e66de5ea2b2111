from exceptions.base import (
    CategoryAppError,
    ConstraintViolationError,
    InstanceNotFoundError,
    InvalidArgumentError,
)

__all__ = [
    "CategoryAppError",
    "ConstraintViolationError",
    "InstanceNotFoundError",
    "InvalidArgumentError",
]
