"""Trip database model."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.base import Base
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.mixins import (
    CreatedAtMixin,
)


class TripModel(CreatedAtMixin, Base):
    """
    Load moved from a site to a buyer.

    Site and buyer are foreign keys that block deleting a referenced partner.
    The hauler is only the free-text conductor name.
    """

    __tablename__ = "trips"

    site_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("sites.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )
    buyer_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("buyers.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )

    conductor: Mapped[Optional[str]] = mapped_column(String(200), nullable=True, index=True)
    plate: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    vehicle_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    weight: Mapped[Optional[Decimal]] = mapped_column(Numeric(precision=12, scale=3), nullable=True)
    loaded_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
