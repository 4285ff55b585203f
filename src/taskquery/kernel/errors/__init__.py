"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    TaskQueryError
    ├── DomainError          (domain.py)
    │   ├── InvalidArgumentError
    │   └── NotFoundError
    └── ApplicationError     (application.py)
        └── UnauthorizedError
"""

from taskquery.kernel.errors.application import ApplicationError, UnauthorizedError
from taskquery.kernel.errors.base import TaskQueryError
from taskquery.kernel.errors.domain import DomainError, InvalidArgumentError, NotFoundError

__all__ = [
    "ApplicationError",
    "DomainError",
    "InvalidArgumentError",
    "NotFoundError",
    "TaskQueryError",
    "UnauthorizedError",
]
