"""Domain value objects package."""

from haulbook.domain.value_objects.counterparty_ref import CounterpartyRef, TransactionSide
from haulbook.domain.value_objects.fusion_snapshot import (
    FusionSnapshot,
    TransactionLink,
    TripLink,
    TripLinkField,
)
from haulbook.domain.value_objects.partner_kind import PartnerKind

__all__ = [
    "CounterpartyRef",
    "FusionSnapshot",
    "PartnerKind",
    "TransactionLink",
    "TransactionSide",
    "TripLink",
    "TripLinkField",
]
