"""Fusion record domain entity."""

from dataclasses import dataclass
from datetime import UTC, datetime

from haulbook.domain.exceptions import FusionAlreadyRevertedError
from haulbook.domain.value_objects.fusion_snapshot import FusionSnapshot
from haulbook.domain.value_objects.partner_kind import PartnerKind


@dataclass
class FusionRecord:
    """
    Ledger entry for one merge.

    Created together with the merge and mutated at most once afterwards, to
    flag it reverted. Records are never deleted.
    """

    id: int | None
    kind: PartnerKind
    origin_id: int
    destination_id: int
    origin_name: str
    destination_name: str
    snapshot: FusionSnapshot
    transactions_affected: int = 0
    trips_affected: int = 0
    performed_by: str | None = None
    fused_at: datetime | None = None
    reverted: bool = False
    reverted_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate fusion record after initialization."""
        if self.origin_id == self.destination_id:
            raise ValueError("Fusion origin and destination must differ")

        if self.transactions_affected < 0 or self.trips_affected < 0:
            raise ValueError("Affected counts cannot be negative")

        if self.snapshot.kind is not self.kind:
            raise ValueError("Snapshot kind does not match fusion kind")

    def mark_reverted(self, when: datetime | None = None) -> None:
        """
        Flag this fusion as reverted.

        Raises:
            FusionAlreadyRevertedError: If it was already reverted
        """
        if self.reverted:
            raise FusionAlreadyRevertedError(self.id)
        self.reverted = True
        self.reverted_at = when or datetime.now(UTC)
