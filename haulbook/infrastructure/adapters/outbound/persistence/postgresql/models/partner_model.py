"""
Partner database models.

Each partner kind has its own table with the same core columns. Haulers add
their registered plate.
"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from haulbook.domain.value_objects.partner_kind import PartnerKind
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.base import Base
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.mixins import (
    PartnerColumnsMixin,
)


class SiteModel(PartnerColumnsMixin, Base):
    """Supply site (mine, quarry)."""

    __tablename__ = "sites"


class BuyerModel(PartnerColumnsMixin, Base):
    """Buyer of hauled material."""

    __tablename__ = "buyers"


class HaulerModel(PartnerColumnsMixin, Base):
    """Hauler; trips refer to it only by conductor name."""

    __tablename__ = "haulers"

    plate: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)


PartnerModel = SiteModel | BuyerModel | HaulerModel

PARTNER_MODELS: dict[PartnerKind, type[SiteModel] | type[BuyerModel] | type[HaulerModel]] = {
    PartnerKind.SITE: SiteModel,
    PartnerKind.BUYER: BuyerModel,
    PartnerKind.HAULER: HaulerModel,
}
