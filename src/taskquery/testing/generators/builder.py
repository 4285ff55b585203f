"""Testing generators – Builder[T] and the task builders."""
from __future__ import annotations

import copy
import itertools
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from taskquery.kernel.tasks import HistoricTask, ProcessInstance, Task

T = TypeVar("T")

_ids = itertools.count(1)


class Builder(Generic[T]):
    """Generic fluent builder base for constructing test objects.

    Each ``with_`` call returns a **new** builder so the original stays
    unchanged::

        base = TaskBuilder()
        mine = base.with_(assignee="kermit")
        theirs = base.with_(assignee="gonzo")
    """

    def __init__(self) -> None:
        self._attrs: dict[str, Any] = {}

    def with_(self, **kwargs: Any) -> "Builder[T]":
        """Return a shallow copy of this builder with *kwargs* applied."""
        clone = copy.copy(self)
        clone._attrs = {**self._attrs, **kwargs}  # noqa: SLF001
        return clone

    @property
    def attrs(self) -> dict[str, Any]:
        return dict(self._attrs)

    def build(self) -> T:  # type: ignore[misc]
        raise NotImplementedError(  # pragma: no cover
            f"{type(self).__name__}.build() is not implemented"
        )

    def __call__(self, **overrides: Any) -> T:
        if overrides:
            return self.with_(**overrides).build()
        return self.build()


class DataclassBuilder(Builder[T]):
    """Builder whose ``build()`` calls ``_cls(**attrs)``."""

    _cls: type[T]

    def build(self) -> T:
        return self._cls(**self._attrs)  # type: ignore[call-arg]


class TaskBuilder(DataclassBuilder[Task]):
    """Runtime tasks with a fresh id and a fixed creation time::

        task = TaskBuilder()(name="Review", candidate_groups=frozenset({"sales"}))
    """

    _cls = Task

    def __init__(self) -> None:
        super().__init__()
        self._attrs = {"create_time": datetime(2024, 1, 1, 9, 0, tzinfo=UTC)}

    def build(self) -> Task:
        attrs = dict(self._attrs)
        attrs.setdefault("id", f"task-{next(_ids)}")
        return Task(**attrs)


class HistoricTaskBuilder(TaskBuilder):
    _cls = HistoricTask  # type: ignore[assignment]

    def build(self) -> HistoricTask:  # type: ignore[override]
        attrs = dict(self._attrs)
        attrs.setdefault("id", f"hi-task-{next(_ids)}")
        return HistoricTask(**attrs)


class ProcessInstanceBuilder(DataclassBuilder[ProcessInstance]):
    _cls = ProcessInstance

    def build(self) -> ProcessInstance:
        attrs = dict(self._attrs)
        attrs.setdefault("id", f"proc-{next(_ids)}")
        return ProcessInstance(**attrs)


__all__ = [
    "Builder",
    "DataclassBuilder",
    "HistoricTaskBuilder",
    "ProcessInstanceBuilder",
    "TaskBuilder",
]
