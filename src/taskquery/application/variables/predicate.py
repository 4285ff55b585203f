"""Application variables – VariablePredicate as received from a client."""
from __future__ import annotations

import dataclasses
from typing import Any

from taskquery.application.query.criteria import VariableOperation


@dataclasses.dataclass(frozen=True)
class VariablePredicate:
    """``{name, operation, value, type}`` entry of a variable filter list.

    ``operation`` may still be textual (``"greaterThan"``); it is resolved
    when the predicate is compiled. ``type`` optionally forces how ``value``
    is interpreted (``"long"``, ``"date"``, ...).
    """
    name: str | None = None
    operation: VariableOperation | str | None = None
    value: Any = None
    type: str | None = None

    @property
    def nameless(self) -> bool:
        return self.name is None


__all__ = ["VariablePredicate"]
