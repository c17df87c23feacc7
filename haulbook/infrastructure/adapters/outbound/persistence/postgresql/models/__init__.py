"""
SQLAlchemy models.

Importing this package registers every table on ``Base.metadata``.
"""

from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.base import (
    Base,
    JSONDocument,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.fusion_record_model import (
    FusionRecordModel,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.partner_model import (
    PARTNER_MODELS,
    BuyerModel,
    HaulerModel,
    PartnerModel,
    SiteModel,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.transaction_model import (
    TransactionModel,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.trip_model import (
    TripModel,
)

__all__ = [
    "Base",
    "BuyerModel",
    "FusionRecordModel",
    "HaulerModel",
    "JSONDocument",
    "PARTNER_MODELS",
    "PartnerModel",
    "SiteModel",
    "TransactionModel",
    "TripModel",
]
