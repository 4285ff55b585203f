"""SQLAlchemy adapter – ORM tables for tasks, identity links and variables."""
from __future__ import annotations

import datetime
import json
from datetime import UTC
from typing import Any

from sqlalchemy import BigInteger, Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from taskquery.kernel.time import to_utc


class Base(DeclarativeBase):
    pass


class ProcessInstanceRow(Base):
    __tablename__ = "tq_process_instance"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    business_key: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    parent_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    process_definition_id: Mapped[str | None] = mapped_column(String(64), nullable=True)


class TaskColumnsMixin:
    """Columns shared by the runtime and the history task tables."""

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    priority: Mapped[int] = mapped_column(Integer, default=50)
    assignee: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    owner: Mapped[str | None] = mapped_column(String(255), nullable=True)
    delegation_state: Mapped[str | None] = mapped_column(String(16), nullable=True)
    due_date: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    create_time: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True))
    category: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tenant_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    form_key: Mapped[str | None] = mapped_column(String(255), nullable=True)
    parent_task_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    task_definition_key: Mapped[str | None] = mapped_column(String(255), nullable=True)
    execution_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    process_instance_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    process_definition_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    process_definition_key: Mapped[str | None] = mapped_column(String(255), nullable=True)
    process_definition_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    scope_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    scope_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    scope_definition_id: Mapped[str | None] = mapped_column(String(255), nullable=True)


class TaskRow(TaskColumnsMixin, Base):
    __tablename__ = "tq_task"

    suspended: Mapped[bool] = mapped_column(Boolean, default=False)


class HistoricTaskRow(TaskColumnsMixin, Base):
    __tablename__ = "tq_hi_task"

    end_time: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    duration_ms: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    delete_reason: Mapped[str | None] = mapped_column(Text, nullable=True)


class IdentityLinkRow(Base):
    """Candidate or participant link between a task and a user or group."""

    __tablename__ = "tq_identity_link"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    task_id: Mapped[str] = mapped_column(String(64), index=True)
    type: Mapped[str] = mapped_column(String(32))
    user_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    group_id: Mapped[str | None] = mapped_column(String(255), nullable=True)


class VariableRow(Base):
    """Typed variable value; ``task_id`` is NULL for process-instance variables."""

    __tablename__ = "tq_variable"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    task_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    process_instance_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    name: Mapped[str] = mapped_column(String(255))
    type: Mapped[str] = mapped_column(String(32))
    text_value: Mapped[str | None] = mapped_column(Text, nullable=True)
    long_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    double_value: Mapped[float | None] = mapped_column(Float, nullable=True)


CANDIDATE = "candidate"
PARTICIPANT = "participant"
INTEGRAL_TYPES = ("long", "integer", "short")


def to_epoch_millis(value: datetime.datetime) -> int:
    """Naive datetimes are taken to be UTC."""
    return int(to_utc(value).timestamp() * 1000)


def encode_variable(value: Any) -> dict[str, Any]:
    """Column values storing *value* in a :class:`VariableRow`."""
    if value is None:
        return {"type": "null"}
    if isinstance(value, bool):
        return {"type": "boolean", "long_value": int(value)}
    if isinstance(value, int):
        return {"type": "long", "long_value": value}
    if isinstance(value, float):
        return {"type": "double", "double_value": value}
    if isinstance(value, str):
        return {"type": "string", "text_value": value}
    if isinstance(value, datetime.datetime):
        return {"type": "date", "long_value": to_epoch_millis(value)}
    return {"type": "json", "text_value": json.dumps(value, default=str)}


def decode_variable(row: VariableRow) -> Any:
    match row.type:
        case "boolean":
            return bool(row.long_value)
        case "long" | "integer" | "short":
            return row.long_value
        case "double":
            return row.double_value
        case "string":
            return row.text_value
        case "date":
            if row.long_value is None:
                return None
            return datetime.datetime.fromtimestamp(row.long_value / 1000, tz=UTC)
        case "json":
            return json.loads(row.text_value) if row.text_value is not None else None
        case _:
            return None


__all__ = [
    "Base",
    "HistoricTaskRow",
    "IdentityLinkRow",
    "ProcessInstanceRow",
    "TaskColumnsMixin",
    "TaskRow",
    "VariableRow",
    "decode_variable",
    "encode_variable",
    "to_epoch_millis",
]
