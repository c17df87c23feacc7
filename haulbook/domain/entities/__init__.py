"""Domain entities package."""

from haulbook.domain.entities.fusion_record import FusionRecord
from haulbook.domain.entities.partner import Partner
from haulbook.domain.entities.transaction import Transaction
from haulbook.domain.entities.trip import Trip

__all__ = [
    "FusionRecord",
    "Partner",
    "Transaction",
    "Trip",
]
