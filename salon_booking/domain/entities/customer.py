from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerIdentity:
    id: str
    name: str
    email: str | None = None
