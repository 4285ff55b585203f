"""Application pagination – PaginateRequest."""
from __future__ import annotations

import dataclasses
from typing import Mapping

from taskquery.kernel.errors import InvalidArgumentError


def _integer_param(params: Mapping[str, str], name: str) -> int | None:
    raw = params.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise InvalidArgumentError(
            f"Value for param '{name}' is not a valid integer: {raw}",
            argument=name,
            value=raw,
        ) from None


@dataclasses.dataclass
class PaginateRequest:
    """Offset pagination parameters; ``None`` means "use the default"."""
    start: int | None = None
    size: int | None = None
    sort: str | None = None
    order: str | None = None

    def with_params(self, params: Mapping[str, str] | None) -> "PaginateRequest":
        """Return a copy whose unset fields are taken from URL-style *params*."""
        if not params:
            return PaginateRequest(self.start, self.size, self.sort, self.order)
        return PaginateRequest(
            start=self.start if self.start is not None else _integer_param(params, "start"),
            size=self.size if self.size is not None else _integer_param(params, "size"),
            sort=self.sort if self.sort is not None else params.get("sort"),
            order=self.order if self.order is not None else params.get("order"),
        )


__all__ = ["PaginateRequest"]
