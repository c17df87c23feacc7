"""Trip domain entity."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from haulbook.domain.value_objects.fusion_snapshot import TripLinkField


@dataclass
class Trip:
    """
    A load of material moved from a site to a buyer.

    Sites and buyers are strict foreign keys. The hauler is identified only
    by the free-text conductor name and plate.
    """

    id: int | None
    conductor: str | None = None
    plate: str | None = None
    site_id: int | None = None
    buyer_id: int | None = None
    vehicle_type: str | None = None
    weight: Decimal | None = None
    loaded_at: datetime | None = None
    created_at: datetime | None = None

    def link_value(self, field: TripLinkField) -> int | str | None:
        """Current value of the column a partner is attributed through."""
        if field is TripLinkField.SITE:
            return self.site_id
        if field is TripLinkField.BUYER:
            return self.buyer_id
        return self.conductor

    def relink(self, field: TripLinkField, value: int | str) -> None:
        """Set the attribution column to ``value``; plate is never touched."""
        if field is TripLinkField.SITE:
            self.site_id = int(value)
        elif field is TripLinkField.BUYER:
            self.buyer_id = int(value)
        else:
            self.conductor = str(value)

    def is_attributed_to(self, field: TripLinkField, value: int | str) -> bool:
        """Exact, case-sensitive check that ``field`` currently holds ``value``."""
        return self.link_value(field) == value
