"""Application query – TaskStore port."""
from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from taskquery.application.query.task_query import TaskQuery

T = TypeVar("T", covariant=True)


@runtime_checkable
class TaskStore(Protocol[T]):
    """Port: runs a :class:`TaskQuery` against live or historic tasks.

    Concrete implementations live in ``adapters/memory`` and
    ``adapters/sqlalchemy``.
    """

    async def count(self, query: TaskQuery) -> int: ...
    async def list_page(self, query: TaskQuery, start: int, size: int) -> list[T]: ...
    async def single_result(self, query: TaskQuery) -> T | None: ...


__all__ = ["TaskStore"]
