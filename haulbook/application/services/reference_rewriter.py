"""
Re-points transactions and trips from one partner to another.

Transactions always reference partners through a typed (kind, id) pair, so
that part is shared. Trips differ per kind: sites and buyers are foreign
keys, haulers are a free-text conductor name. Each trip scheme is a
``ReferenceRewriter`` subclass; ``rewriter_for`` picks one by kind.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from haulbook.application.exceptions import ConflictingStateError
from haulbook.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from haulbook.application.services.snapshot_recorder import attributed_trips
from haulbook.domain.entities.partner import Partner
from haulbook.domain.value_objects.fusion_snapshot import FusionSnapshot, TripLinkField
from haulbook.domain.value_objects.partner_kind import PartnerKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RewriteCounts:
    """Rows touched by a rewrite pass."""

    transactions: int = 0
    trips: int = 0


class ReferenceRewriter(ABC):
    """Base class for the per-kind rewrite strategies."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize rewriter.

        Args:
            uow: Unit of Work the merge or revert runs in
        """
        self.uow = uow

    @property
    @abstractmethod
    def trip_field(self) -> TripLinkField:
        """Trip column this strategy rewrites."""

    @abstractmethod
    def trip_target(self, destination: Partner) -> int | str:
        """Value written into ``trip_field`` for trips moved to ``destination``."""

    async def forward(self, snapshot: FusionSnapshot, destination: Partner) -> RewriteCounts:
        """
        Move every reference to the snapshot's origin onto ``destination``.

        The live set of referencing rows must equal the snapshot's, otherwise
        someone wrote to them after capture and the merge is abandoned.

        Args:
            snapshot: Snapshot captured for the origin in this unit of work
            destination: Partner that absorbs the origin

        Returns:
            Counts of transactions and trips rewritten

        Raises:
            ConflictingStateError: If referencing rows changed since capture
        """
        if destination.kind is not snapshot.kind:
            raise ValueError("Cannot rewrite references across partner kinds")

        origin = Partner.from_snapshot(snapshot.kind, snapshot.origin)
        transactions = await self._forward_transactions(snapshot, origin, destination)
        trips = await self._forward_trips(snapshot, origin, destination)
        return RewriteCounts(transactions=transactions, trips=trips)

    async def backward(self, snapshot: FusionSnapshot) -> RewriteCounts:
        """
        Restore every recorded row to its pre-merge linkage.

        Rows deleted since the merge are skipped. Applying the same snapshot
        twice leaves the rows unchanged the second time.

        Returns:
            Counts of transactions and trips restored
        """
        origin_ref = snapshot.origin_ref
        links = {link.transaction_id: link for link in snapshot.transactions}
        transactions = await self.uow.transactions.get_many(list(links))
        for transaction in transactions:
            link = links[transaction.id]
            transaction.relink(link.sides, origin_ref)
            transaction.concept = link.concept
            await self.uow.transactions.update(transaction)

        trip_links = {link.trip_id: link for link in snapshot.trips}
        trips = await self.uow.trips.get_many(list(trip_links))
        for trip in trips:
            link = trip_links[trip.id]
            trip.relink(link.field, link.original_value)
            await self.uow.trips.update(trip)

        skipped = len(links) + len(trip_links) - len(transactions) - len(trips)
        if skipped:
            logger.info(
                f"Skipped {skipped} rows deleted since fusion of "
                f"{snapshot.kind.value} {snapshot.origin_id}"
            )
        return RewriteCounts(transactions=len(transactions), trips=len(trips))

    async def _forward_transactions(
        self, snapshot: FusionSnapshot, origin: Partner, destination: Partner
    ) -> int:
        origin_ref = snapshot.origin_ref
        destination_ref = destination.reference()
        live = await self.uow.transactions.list_referencing(origin_ref)
        _ensure_unchanged(
            "transactions",
            (transaction.id for transaction in live),
            (link.transaction_id for link in snapshot.transactions),
        )

        for transaction in live:
            transaction.relink(transaction.sides_referencing(origin_ref), destination_ref)
            transaction.rename_in_concept(origin.name, destination.name)
            await self.uow.transactions.update(transaction)
        return len(live)

    async def _forward_trips(
        self, snapshot: FusionSnapshot, origin: Partner, destination: Partner
    ) -> int:
        live = await attributed_trips(self.uow, origin)
        _ensure_unchanged(
            "trips",
            (trip.id for trip in live),
            (link.trip_id for link in snapshot.trips),
        )

        target = self.trip_target(destination)
        for trip in live:
            trip.relink(self.trip_field, target)
            await self.uow.trips.update(trip)
        return len(live)


class ForeignKeyReferenceRewriter(ReferenceRewriter):
    """Sites and buyers: trips hold a foreign key to the partner."""

    def __init__(self, uow: UnitOfWorkPort, field: TripLinkField):
        if field is TripLinkField.CONDUCTOR:
            raise ValueError("Conductor names are not foreign keys")
        super().__init__(uow)
        self._field = field

    @property
    def trip_field(self) -> TripLinkField:
        return self._field

    def trip_target(self, destination: Partner) -> int:
        if destination.id is None:
            raise ValueError("Destination must be persisted")
        return destination.id


class ConductorNameReferenceRewriter(ReferenceRewriter):
    """
    Haulers: trips only carry the conductor's name and plate.

    Trips whose conductor equals the origin name exactly are renamed to the
    destination's current name. Plates are left as they are, since one
    hauler may drive several vehicles.
    """

    @property
    def trip_field(self) -> TripLinkField:
        return TripLinkField.CONDUCTOR

    def trip_target(self, destination: Partner) -> str:
        return destination.name


def rewriter_for(kind: PartnerKind, uow: UnitOfWorkPort) -> ReferenceRewriter:
    """
    Select the rewrite strategy for a partner kind.

    Args:
        kind: Partner kind being merged or restored
        uow: Unit of Work the rewriter writes through

    Returns:
        Rewriter bound to ``uow``
    """
    if kind is PartnerKind.HAULER:
        return ConductorNameReferenceRewriter(uow)
    return ForeignKeyReferenceRewriter(uow, TripLinkField.for_kind(kind))


def _ensure_unchanged(what: str, live: Iterable[int], captured: Iterable[int]) -> None:
    live_ids, captured_ids = set(live), set(captured)
    if live_ids != captured_ids:
        raise ConflictingStateError(
            f"Referencing {what} changed while the merge was running",
            operation="merge",
            current_state=f"{len(live_ids)} live vs {len(captured_ids)} captured {what}",
        )
