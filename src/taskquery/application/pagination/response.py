"""Application pagination – DataResponse envelope."""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclasses.dataclass
class DataResponse(Generic[T]):
    """One page of mapped items plus the paging metadata it was fetched with.

    ``size`` is the number of items actually returned, ``total`` the number
    of matches across all pages.
    """

    data: list[T]
    total: int
    start: int
    size: int
    sort: str
    order: str

    @property
    def has_next(self) -> bool:
        return self.start + self.size < self.total

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": list(self.data),
            "total": self.total,
            "start": self.start,
            "size": self.size,
            "sort": self.sort,
            "order": self.order,
        }


__all__ = ["DataResponse"]
