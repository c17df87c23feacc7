"""Outbound ports (driven adapters interfaces)."""

from haulbook.application.ports.outbound.balance_recalculation_port import (
    BalanceRecalculationPort,
)
from haulbook.application.ports.outbound.fusion_record_repository_port import (
    FusionRecordRepositoryPort,
)
from haulbook.application.ports.outbound.partner_repository_port import PartnerRepositoryPort
from haulbook.application.ports.outbound.transaction_repository_port import (
    TransactionRepositoryPort,
)
from haulbook.application.ports.outbound.trip_repository_port import TripRepositoryPort
from haulbook.application.ports.outbound.unit_of_work_port import UnitOfWorkPort

__all__ = [
    "BalanceRecalculationPort",
    "FusionRecordRepositoryPort",
    "PartnerRepositoryPort",
    "TransactionRepositoryPort",
    "TripRepositoryPort",
    "UnitOfWorkPort",
]
