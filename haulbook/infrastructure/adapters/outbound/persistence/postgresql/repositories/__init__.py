"""SQLAlchemy repository implementations."""

from haulbook.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.repositories.fusion_record_repository import (
    PostgresFusionRecordRepository,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.repositories.partner_repository import (
    PostgresPartnerRepository,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.repositories.transaction_repository import (
    PostgresTransactionRepository,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.repositories.trip_repository import (
    PostgresTripRepository,
)

__all__ = [
    "BaseRepository",
    "PostgresFusionRecordRepository",
    "PostgresPartnerRepository",
    "PostgresTransactionRepository",
    "PostgresTripRepository",
]
