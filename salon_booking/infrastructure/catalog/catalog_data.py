from __future__ import annotations

from decimal import Decimal

from salon_booking.domain.entities.catalog import ServiceOffering, StylistProfile

SERVICES: list[ServiceOffering] = [
    ServiceOffering(id="1", name="Eyelash Extensions", price=Decimal("1200"), category="lash", duration_minutes=120),
    ServiceOffering(id="2", name="Professional Makeup", price=Decimal("850"), category="makeup", duration_minutes=120),
    ServiceOffering(id="3", name="Luxury Manicure", price=Decimal("450"), category="mani", duration_minutes=120),
    ServiceOffering(id="4", name="Deluxe Pedicure", price=Decimal("550"), category="nail", duration_minutes=120),
    ServiceOffering(id="5", name="Bridal Hair", price=Decimal("1500"), category="bridal", active=False),
]

STYLISTS: list[StylistProfile] = [
    StylistProfile(id="1", name="Angie", specialty="Lashista | Makeup Artist"),
    StylistProfile(id="2", name="Katy", specialty="Manicurista"),
    StylistProfile(id="3", name="Naty", specialty="Nail Technician & Hair"),
]
