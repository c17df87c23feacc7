"""Mappers between domain entities and SQLAlchemy models."""

from haulbook.infrastructure.adapters.outbound.persistence.postgresql.mappers.fusion_record_mapper import (
    FusionRecordMapper,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.mappers.partner_mapper import (
    PartnerMapper,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.mappers.transaction_mapper import (
    TransactionMapper,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.mappers.trip_mapper import (
    TripMapper,
)

__all__ = [
    "FusionRecordMapper",
    "PartnerMapper",
    "TransactionMapper",
    "TripMapper",
]
