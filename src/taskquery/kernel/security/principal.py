"""Kernel security – Principal."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Principal:
    """Authenticated identity on whose behalf tasks are queried."""
    subject: str
    tenant_id: str | None = None
    roles: frozenset[str] = frozenset()
    groups: frozenset[str] = frozenset()

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def in_group(self, group: str) -> bool:
        return group in self.groups


__all__ = ["Principal"]
