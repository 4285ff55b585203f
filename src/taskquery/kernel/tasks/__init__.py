"""Kernel tasks – entities and the delegation state."""
from taskquery.kernel.tasks.delegation import DelegationState, resolve_delegation_state
from taskquery.kernel.tasks.task import HistoricTask, ProcessInstance, Task, TaskInfo

__all__ = [
    "DelegationState",
    "HistoricTask",
    "ProcessInstance",
    "Task",
    "TaskInfo",
    "resolve_delegation_state",
]
