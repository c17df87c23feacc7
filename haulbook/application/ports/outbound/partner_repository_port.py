"""Partner repository port interface."""

from typing import Optional, Protocol, Sequence

from haulbook.domain.entities.partner import Partner
from haulbook.domain.value_objects.partner_kind import PartnerKind


class PartnerRepositoryPort(Protocol):
    """Repository interface for Partner entities of all three kinds."""

    async def get_by_id(self, kind: PartnerKind, partner_id: int) -> Optional[Partner]:
        """
        Retrieve partner by kind and ID.

        Returns:
            Partner entity if found, None otherwise
        """
        ...

    async def get_for_update(self, kind: PartnerKind, partner_id: int) -> Optional[Partner]:
        """
        Retrieve partner and lock its row until the transaction ends.

        Returns:
            Partner entity if found, None otherwise
        """
        ...

    async def add(self, partner: Partner) -> Partner:
        """
        Insert a partner.

        When ``partner.id`` is set the row is inserted under that id.

        Returns:
            Created partner entity
        """
        ...

    async def delete(self, kind: PartnerKind, partner_id: int) -> bool:
        """
        Hard delete partner.

        Returns:
            True if a row was deleted, False if it no longer existed
        """
        ...

    async def exists(self, kind: PartnerKind, partner_id: int) -> bool:
        """Check if partner exists."""
        ...

    async def mark_balance_stale(self, kind: PartnerKind, partner_ids: Sequence[int]) -> int:
        """
        Flag partners so the external balance job recalculates them.

        Returns:
            Number of rows flagged
        """
        ...
