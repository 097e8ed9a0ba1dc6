from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ServiceOffering:
    id: str
    name: str
    price: Decimal
    category: str = ""  # category tag, matched against stylist specialty
    active: bool = True
    description: str | None = None
    duration_minutes: int | None = None


@dataclass(frozen=True)
class StylistProfile:
    id: str
    name: str
    specialty: str = ""
    active: bool = True
    bio: str | None = None
