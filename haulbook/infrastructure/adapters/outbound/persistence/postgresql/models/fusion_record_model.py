"""Fusion record database model."""

from datetime import UTC, datetime
from typing import Any, Optional

from sqlalchemy import Boolean, DateTime, Enum, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column

from haulbook.domain.value_objects.partner_kind import PartnerKind
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.base import (
    Base,
    JSONDocument,
)


class FusionRecordModel(Base):
    """
    Ledger row for one merge.

    ``snapshot`` holds the origin partner row and the pre-merge linkage of
    every affected transaction and trip. Rows are never deleted; the only
    update is flipping ``reverted``.
    """

    __tablename__ = "fusion_records"

    partner_kind: Mapped[PartnerKind] = mapped_column(
        Enum(
            PartnerKind,
            name="partner_kind_enum",
            values_callable=lambda kinds: [kind.value for kind in kinds],
        ),
        nullable=False,
        index=True,
    )

    # Plain integers: the origin row is gone while the fusion stands
    origin_id: Mapped[int] = mapped_column(Integer, nullable=False)
    destination_id: Mapped[int] = mapped_column(Integer, nullable=False)
    origin_name: Mapped[str] = mapped_column(String(200), nullable=False)
    destination_name: Mapped[str] = mapped_column(String(200), nullable=False)

    snapshot: Mapped[dict[str, Any]] = mapped_column(JSONDocument, nullable=False)
    transactions_affected: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    trips_affected: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    performed_by: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)
    fused_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        index=True,
    )

    reverted: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )
    reverted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
