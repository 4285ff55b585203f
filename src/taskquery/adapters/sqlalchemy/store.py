"""SQLAlchemy adapter – SqlAlchemyTaskStore and SqlAlchemyHistoricTaskStore."""
from __future__ import annotations

from collections import defaultdict
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskquery.adapters.sqlalchemy.clauses import ordered, where_clauses
from taskquery.adapters.sqlalchemy.models import (
    CANDIDATE,
    PARTICIPANT,
    HistoricTaskRow,
    IdentityLinkRow,
    ProcessInstanceRow,
    TaskColumnsMixin,
    TaskRow,
    VariableRow,
    decode_variable,
    encode_variable,
)
from taskquery.application.query import TaskQuery
from taskquery.kernel.errors import DomainError
from taskquery.kernel.tasks import DelegationState, HistoricTask, ProcessInstance, Task, TaskInfo
from taskquery.kernel.time import to_utc

TTask = TypeVar("TTask", bound=TaskInfo)

_COMMON_FIELDS = (
    "id",
    "name",
    "description",
    "priority",
    "assignee",
    "owner",
    "due_date",
    "create_time",
    "category",
    "tenant_id",
    "form_key",
    "parent_task_id",
    "task_definition_key",
    "execution_id",
    "process_instance_id",
    "process_definition_id",
    "process_definition_key",
    "process_definition_name",
    "scope_id",
    "scope_type",
    "scope_definition_id",
)


class _SqlAlchemyTaskStoreBase(Generic[TTask]):
    """Shared query plumbing; subclasses bind the row and entity types."""

    _row: type[TaskColumnsMixin]
    _entity: type[TaskInfo]
    _extra_fields: tuple[str, ...] = ()

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    # ------------------------------------------------------------------
    # TaskStore port
    # ------------------------------------------------------------------

    def _count_statement(self, query: TaskQuery) -> Select[tuple[int]]:
        row = self._row
        return select(func.count()).select_from(row).where(*where_clauses(row, query))

    async def count(self, query: TaskQuery) -> int:
        async with self._session_factory() as session:
            return int((await session.execute(self._count_statement(query))).scalar_one())

    async def list_page(self, query: TaskQuery, start: int, size: int) -> list[TTask]:
        row = self._row
        stmt = ordered(row, query, select(row).where(*where_clauses(row, query)))
        stmt = stmt.offset(start).limit(size)
        async with self._session_factory() as session:
            rows = (await session.execute(stmt)).scalars().all()
            return await self._to_entities(session, query, rows)

    async def single_result(self, query: TaskQuery) -> TTask | None:
        row = self._row
        stmt = select(row).where(*where_clauses(row, query)).limit(2)
        async with self._session_factory() as session:
            rows = (await session.execute(stmt)).scalars().all()
            if len(rows) > 1:
                total = (await session.execute(self._count_statement(query))).scalar_one()
                raise DomainError(f"Query return {total} results instead of max 1")
            entities = await self._to_entities(session, query, rows)
        return entities[0] if entities else None

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    async def add(self, task: TTask) -> None:
        """Persist *task* with its identity links and task-local variables."""
        values = {name: to_utc(getattr(task, name)) for name in _COMMON_FIELDS + self._extra_fields}
        values["delegation_state"] = task.delegation_state.value if task.delegation_state else None
        async with self._session_factory() as session, session.begin():
            session.add(self._row(**values))
            for user_id in task.candidate_users:
                session.add(IdentityLinkRow(task_id=task.id, type=CANDIDATE, user_id=user_id))
            for group_id in task.candidate_groups:
                session.add(IdentityLinkRow(task_id=task.id, type=CANDIDATE, group_id=group_id))
            for user_id in task.participants:
                session.add(IdentityLinkRow(task_id=task.id, type=PARTICIPANT, user_id=user_id))
            for name, value in task.task_local_variables.items():
                session.add(
                    VariableRow(
                        task_id=task.id,
                        process_instance_id=task.process_instance_id,
                        name=name,
                        **encode_variable(value),
                    )
                )

    async def add_process_instance(self, instance: ProcessInstance) -> None:
        """Persist *instance* and its process variables."""
        async with self._session_factory() as session, session.begin():
            session.add(
                ProcessInstanceRow(
                    id=instance.id,
                    business_key=instance.business_key,
                    parent_id=instance.parent_id,
                    process_definition_id=instance.process_definition_id,
                )
            )
            for name, value in instance.variables.items():
                session.add(
                    VariableRow(
                        task_id=None,
                        process_instance_id=instance.id,
                        name=name,
                        **encode_variable(value),
                    )
                )

    # ------------------------------------------------------------------
    # Row -> entity
    # ------------------------------------------------------------------

    async def _to_entities(
        self, session: AsyncSession, query: TaskQuery, rows: Sequence[Any]
    ) -> list[TTask]:
        if not rows:
            return []
        task_ids = [r.id for r in rows]
        links = (
            await session.execute(select(IdentityLinkRow).where(IdentityLinkRow.task_id.in_(task_ids)))
        ).scalars().all()
        by_task: dict[str, list[IdentityLinkRow]] = defaultdict(list)
        for link in links:
            by_task[link.task_id].append(link)

        local_vars: dict[str, dict[str, Any]] = defaultdict(dict)
        if query.include_task_local_variables_flag:
            stmt = select(VariableRow).where(VariableRow.task_id.in_(task_ids))
            for var in (await session.execute(stmt)).scalars().all():
                local_vars[var.task_id][var.name] = decode_variable(var)

        process_vars: dict[str, dict[str, Any]] = defaultdict(dict)
        if query.include_process_variables_flag:
            instance_ids = {r.process_instance_id for r in rows if r.process_instance_id}
            stmt = select(VariableRow).where(
                VariableRow.task_id.is_(None), VariableRow.process_instance_id.in_(instance_ids)
            )
            for var in (await session.execute(stmt)).scalars().all():
                process_vars[var.process_instance_id][var.name] = decode_variable(var)

        return [
            self._to_entity(r, by_task[r.id], local_vars[r.id], process_vars[r.process_instance_id])
            for r in rows
        ]

    def _to_entity(
        self,
        row: Any,
        links: list[IdentityLinkRow],
        task_local_variables: dict[str, Any],
        process_variables: dict[str, Any],
    ) -> TTask:
        values = {name: to_utc(getattr(row, name)) for name in _COMMON_FIELDS + self._extra_fields}
        if row.delegation_state:
            values["delegation_state"] = DelegationState(row.delegation_state)
        candidates = [link for link in links if link.type == CANDIDATE]
        return self._entity(  # type: ignore[return-value]
            **values,
            candidate_users=frozenset(link.user_id for link in candidates if link.user_id),
            candidate_groups=frozenset(link.group_id for link in candidates if link.group_id),
            participants=frozenset(
                link.user_id for link in links if link.type == PARTICIPANT and link.user_id
            ),
            task_local_variables=dict(task_local_variables),
            process_variables=dict(process_variables),
        )


class SqlAlchemyTaskStore(_SqlAlchemyTaskStoreBase[Task]):
    """Runtime task store over the ``tq_task`` table."""

    _row = TaskRow
    _entity = Task
    _extra_fields = ("suspended",)


class SqlAlchemyHistoricTaskStore(_SqlAlchemyTaskStoreBase[HistoricTask]):
    """History task store over the ``tq_hi_task`` table."""

    _row = HistoricTaskRow
    _entity = HistoricTask
    _extra_fields = ("end_time", "duration_ms", "delete_reason")


__all__ = ["SqlAlchemyHistoricTaskStore", "SqlAlchemyTaskStore"]
