"""Application-layer errors – access decisions taken around a use case."""

from __future__ import annotations

from typing import Any

from taskquery.kernel.errors.base import TaskQueryError


class ApplicationError(TaskQueryError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """The current principal may not run the query or see the entity."""

    default_code = "unauthorized"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        subject: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.subject = subject


__all__ = [
    "ApplicationError",
    "UnauthorizedError",
]
