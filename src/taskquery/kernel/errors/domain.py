"""Domain errors – rejected request input and missing entities."""

from __future__ import annotations

from typing import Any

from taskquery.kernel.errors.base import TaskQueryError


class DomainError(TaskQueryError):
    """Raised when a request cannot be turned into a valid task query."""

    default_code = "domain_error"


class InvalidArgumentError(DomainError):
    """A request field, predicate or parameter holds an unusable value.

    ``argument`` names the offending field when known and ``value`` keeps the
    raw input so the failure can be reproduced.
    """

    default_code = "invalid_argument"

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        if argument is not None:
            detail.setdefault("argument", argument)
        if value is not None:
            detail.setdefault("value", value)
        super().__init__(message, detail=detail, **kwargs)
        self.argument = argument
        self.value = value


class NotFoundError(DomainError):
    """The requested entity does not exist in the store."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"Could not find a {resource}."
        if identifier is not None:
            msg = f"Could not find a {resource} with id '{identifier}'."
        detail = dict(kwargs.pop("detail", None) or {})
        detail.setdefault("resource", resource)
        if identifier is not None:
            detail.setdefault("identifier", identifier)
        super().__init__(msg, detail=detail, **kwargs)
        self.resource = resource
        self.identifier = identifier


__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "NotFoundError",
]
