"""
Reusable mixins for database models.

- CreatedAtMixin: creation timestamp
- PartnerColumnsMixin: columns shared by the three partner tables
"""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import Boolean, DateTime, Numeric, String, false
from sqlalchemy.orm import Mapped, mapped_column

from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.base import (
    JSONDocument,
)


class CreatedAtMixin:
    """Adds a UTC ``created_at`` column set on insert."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )


class PartnerColumnsMixin(CreatedAtMixin):
    """
    Columns shared by sites, buyers and haulers.

    ``balance`` and its bookkeeping columns are maintained by the external
    balance job; ``balance_stale`` is how this service asks for a rerun.

    SQLite tables use AUTOINCREMENT so a deleted partner's id is never handed
    out again; reverting a fusion recreates the origin under that id.
    """

    __table_args__ = {"sqlite_autoincrement": True}

    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)

    balance: Mapped[Decimal] = mapped_column(
        Numeric(precision=15, scale=2),
        nullable=False,
        default=Decimal("0"),
    )

    balance_stale: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    last_recalculated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    # Kind-specific price / freight defaults, opaque to this service
    defaults: Mapped[dict[str, Any]] = mapped_column(
        JSONDocument,
        nullable=False,
        default=lambda: {},
    )

    owner_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)
