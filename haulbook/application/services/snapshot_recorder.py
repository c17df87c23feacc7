"""Captures the pre-merge state of an origin partner."""

import logging

from haulbook.application.exceptions import NotFoundError
from haulbook.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from haulbook.domain.entities.partner import Partner
from haulbook.domain.entities.trip import Trip
from haulbook.domain.value_objects.fusion_snapshot import (
    FusionSnapshot,
    TransactionLink,
    TripLink,
)
from haulbook.domain.value_objects.partner_kind import PartnerKind

logger = logging.getLogger(__name__)


async def attributed_trips(uow: UnitOfWorkPort, partner: Partner) -> list[Trip]:
    """
    Trips currently attributed to ``partner``.

    Sites and buyers match on their foreign key; haulers on the exact
    conductor name. The exact-match filter is re-applied here so a
    case-insensitive database collation cannot widen the hauler match.
    """
    field, value = partner.trip_attribution()
    trips = await uow.trips.list_by_link(field, value)
    return [trip for trip in trips if trip.is_attributed_to(field, value)]


class SnapshotRecorder:
    """
    Builds the snapshot a merge stores so it can later be undone.

    Runs inside the caller's unit of work and locks the origin row, so the
    captured linkage cannot change before the rewrite that follows.
    """

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize recorder.

        Args:
            uow: Unit of Work the merge runs in
        """
        self.uow = uow

    async def capture(self, kind: PartnerKind, origin_id: int) -> FusionSnapshot:
        """
        Capture the origin partner and every row that references it.

        Args:
            kind: Partner kind of the origin
            origin_id: Origin partner id

        Returns:
            Snapshot sufficient to reverse a subsequent forward rewrite

        Raises:
            NotFoundError: If the origin does not exist
        """
        origin = await self.uow.partners.get_for_update(kind, origin_id)
        if origin is None:
            raise NotFoundError(
                message=f"{kind.label} {origin_id} not found",
                resource_type=kind.label,
                resource_id=str(origin_id),
            )

        ref = origin.reference()
        transactions = await self.uow.transactions.list_referencing(ref)
        transaction_links = tuple(
            TransactionLink(
                transaction_id=transaction.id,
                sides=transaction.sides_referencing(ref),
                concept=transaction.concept,
            )
            for transaction in transactions
        )

        field, _ = origin.trip_attribution()
        trip_links = tuple(
            TripLink(trip_id=trip.id, field=field, original_value=trip.link_value(field))
            for trip in await attributed_trips(self.uow, origin)
        )

        logger.debug(
            f"Captured {kind.value} {origin_id}: "
            f"{len(transaction_links)} transactions, {len(trip_links)} trips"
        )

        return FusionSnapshot(
            kind=kind,
            origin=origin.to_snapshot(),
            transactions=transaction_links,
            trips=trip_links,
        )
