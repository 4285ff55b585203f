"""Kernel – framework-agnostic building blocks (errors, entities, security)."""

from taskquery.kernel.errors import (
    ApplicationError,
    DomainError,
    InvalidArgumentError,
    NotFoundError,
    TaskQueryError,
    UnauthorizedError,
)

__all__ = [
    "ApplicationError",
    "DomainError",
    "InvalidArgumentError",
    "NotFoundError",
    "TaskQueryError",
    "UnauthorizedError",
]
