"""
Transaction database model.

Counterparties are stored as a (kind, id) text pair on each side rather than
as foreign keys, so that non-partner parties can be recorded too.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.base import Base
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.mixins import (
    CreatedAtMixin,
)


class TransactionModel(CreatedAtMixin, Base):
    """Monetary movement between two counterparties."""

    __tablename__ = "transactions"

    value: Mapped[Decimal] = mapped_column(Numeric(precision=15, scale=2), nullable=False)
    concept: Mapped[str] = mapped_column(Text, nullable=False, default="")
    occurred_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    from_kind: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    from_id: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    to_kind: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    to_id: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    __table_args__ = (
        Index("ix_transactions_from_ref", "from_kind", "from_id"),
        Index("ix_transactions_to_ref", "to_kind", "to_id"),
    )
