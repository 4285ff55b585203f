"""Delegation state of a task and its textual resolver."""
from __future__ import annotations

from enum import Enum

from taskquery.kernel.errors import InvalidArgumentError


class DelegationState(str, Enum):
    """Whether a delegated task still waits for its owner (``PENDING``)."""

    PENDING = "pending"
    RESOLVED = "resolved"

    def __str__(self) -> str:
        return self.value


def resolve_delegation_state(value: str | None) -> DelegationState | None:
    """Map textual *value* onto :class:`DelegationState`, ignoring case.

    ``None`` means "no constraint" and is returned unchanged.

    Raises:
        InvalidArgumentError: *value* names neither state.
    """
    if value is None:
        return None
    if isinstance(value, DelegationState):
        return value
    for state in DelegationState:
        if state.value == str(value).lower():
            return state
    raise InvalidArgumentError(
        f"Illegal value for delegationState: {value}",
        argument="delegationState",
        value=value,
    )


__all__ = ["DelegationState", "resolve_delegation_state"]
