"""Fusion record repository port interface."""

from datetime import datetime
from typing import Optional, Protocol

from haulbook.domain.entities.fusion_record import FusionRecord
from haulbook.domain.value_objects.partner_kind import PartnerKind


class FusionRecordRepositoryPort(Protocol):
    """Repository interface for the append-only fusion ledger."""

    async def add(self, record: FusionRecord) -> FusionRecord:
        """
        Append a fusion record.

        Returns:
            Created record with its generated id and timestamp
        """
        ...

    async def get_by_id(self, fusion_id: int) -> Optional[FusionRecord]:
        """Retrieve fusion record by ID."""
        ...

    async def get_for_update(self, fusion_id: int) -> Optional[FusionRecord]:
        """Retrieve fusion record and lock its row until the transaction ends."""
        ...

    async def mark_reverted(self, fusion_id: int, reverted_at: datetime) -> bool:
        """
        Flip the reverted flag if it is still false.

        Returns:
            True if this call flipped it, False if it was already set
        """
        ...

    async def list_recent(
        self,
        kind: Optional[PartnerKind] = None,
        performed_by: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[FusionRecord]:
        """
        List fusion records, most recent first.

        Args:
            kind: Only records for this partner kind
            performed_by: Only records created by this operator
            skip: Number of records to skip (offset)
            limit: Maximum number of records to return

        Returns:
            List of fusion records
        """
        ...

    async def count(
        self,
        kind: Optional[PartnerKind] = None,
        performed_by: Optional[str] = None,
    ) -> int:
        """Count fusion records matching the filters."""
        ...
