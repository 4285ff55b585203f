"""Config – TaskQuerySettings."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import ClassVar

from taskquery.config.settings.base import Settings
from taskquery.config.validation import InvalidSettingValueError


class UnknownSortPolicy(str, Enum):
    """What to do with a sort key that is not in the sort registry."""

    REJECT = "reject"
    FALLBACK = "fallback"


@dataclasses.dataclass
class TaskQuerySettings(Settings):
    """Paging and sorting defaults, read from ``TASKQUERY_*`` variables."""

    _prefix: ClassVar[str] = "TASKQUERY"

    default_sort: str = "id"
    default_order: str = "asc"
    default_page_size: int = 10
    max_page_size: int = 0
    unknown_sort_policy: str = UnknownSortPolicy.REJECT.value

    def _validate(self) -> None:
        if self.default_order not in ("asc", "desc"):
            raise InvalidSettingValueError("default_order", self.default_order, "must be 'asc' or 'desc'")
        if self.default_page_size < 0:
            raise InvalidSettingValueError("default_page_size", self.default_page_size, "must be >= 0")
        if self.max_page_size < 0:
            raise InvalidSettingValueError("max_page_size", self.max_page_size, "must be >= 0 (0 = unbounded)")
        try:
            UnknownSortPolicy(str(self.unknown_sort_policy).lower())
        except ValueError:
            raise InvalidSettingValueError(
                "unknown_sort_policy",
                self.unknown_sort_policy,
                "must be 'reject' or 'fallback'",
            ) from None

    @property
    def sort_policy(self) -> UnknownSortPolicy:
        return UnknownSortPolicy(str(self.unknown_sort_policy).lower())


__all__ = ["TaskQuerySettings", "UnknownSortPolicy"]
