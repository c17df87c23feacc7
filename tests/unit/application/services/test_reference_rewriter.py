"""Unit tests for the reference rewrite strategies."""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from haulbook.application.exceptions import ConflictingStateError
from haulbook.application.services.reference_rewriter import (
    ConductorNameReferenceRewriter,
    ForeignKeyReferenceRewriter,
    RewriteCounts,
    rewriter_for,
)
from haulbook.domain.entities.partner import Partner
from haulbook.domain.entities.transaction import Transaction
from haulbook.domain.entities.trip import Trip
from haulbook.domain.value_objects.counterparty_ref import CounterpartyRef, TransactionSide
from haulbook.domain.value_objects.fusion_snapshot import (
    FusionSnapshot,
    TransactionLink,
    TripLink,
    TripLinkField,
)
from haulbook.domain.value_objects.partner_kind import PartnerKind

SITE_1 = CounterpartyRef("site", "1")
SITE_2 = CounterpartyRef("site", "2")
BUYER_5 = CounterpartyRef("buyer", "5")

ORIGIN = Partner(id=1, kind=PartnerKind.SITE, name="Cantera Norte")
DESTINATION = Partner(id=2, kind=PartnerKind.SITE, name="Cantera Norte S.A.")


def make_transaction(transaction_id: int, concept: str, **refs) -> Transaction:
    return Transaction(
        id=transaction_id,
        value=Decimal("100"),
        concept=concept,
        occurred_at=datetime(2024, 3, 1, tzinfo=UTC),
        **refs,
    )


@pytest.fixture
def site_snapshot() -> FusionSnapshot:
    return FusionSnapshot(
        kind=PartnerKind.SITE,
        origin=ORIGIN.to_snapshot(),
        transactions=(
            TransactionLink(10, (TransactionSide.FROM,), "Pago Cantera Norte"),
        ),
        trips=(
            TripLink(20, TripLinkField.SITE, 1),
            TripLink(21, TripLinkField.SITE, 1),
        ),
    )


class TestRewriterFor:
    @pytest.mark.parametrize(
        "kind,cls,field",
        [
            (PartnerKind.SITE, ForeignKeyReferenceRewriter, TripLinkField.SITE),
            (PartnerKind.BUYER, ForeignKeyReferenceRewriter, TripLinkField.BUYER),
            (PartnerKind.HAULER, ConductorNameReferenceRewriter, TripLinkField.CONDUCTOR),
        ],
    )
    def test_selects_strategy_by_kind(self, mock_uow, kind, cls, field):
        rewriter = rewriter_for(kind, mock_uow)

        assert isinstance(rewriter, cls)
        assert rewriter.trip_field is field

    def test_foreign_key_rewriter_rejects_conductor(self, mock_uow):
        with pytest.raises(ValueError):
            ForeignKeyReferenceRewriter(mock_uow, TripLinkField.CONDUCTOR)

    def test_conductor_target_is_destination_name(self, mock_uow):
        hauler = Partner(id=8, kind=PartnerKind.HAULER, name="Juan Perez")
        assert ConductorNameReferenceRewriter(mock_uow).trip_target(hauler) == "Juan Perez"


class TestForward:
    """Test moving references onto the destination."""

    @pytest.mark.asyncio
    async def test_forward_moves_references(self, mock_uow, site_snapshot):
        transaction = make_transaction(10, "Pago cantera norte", from_ref=SITE_1, to_ref=BUYER_5)
        trips = [Trip(id=20, site_id=1, buyer_id=5), Trip(id=21, site_id=1, buyer_id=5)]
        mock_uow.transactions.list_referencing = AsyncMock(return_value=[transaction])
        mock_uow.trips.list_by_link = AsyncMock(return_value=trips)

        counts = await rewriter_for(PartnerKind.SITE, mock_uow).forward(site_snapshot, DESTINATION)

        assert counts == RewriteCounts(transactions=1, trips=2)
        assert transaction.from_ref == SITE_2
        assert transaction.to_ref == BUYER_5
        assert transaction.concept == "Pago Cantera Norte S.A."
        assert [trip.site_id for trip in trips] == [2, 2]
        assert [trip.buyer_id for trip in trips] == [5, 5]
        assert mock_uow.trips.update.await_count == 2

    @pytest.mark.asyncio
    async def test_forward_detects_new_referencing_rows(self, mock_uow, site_snapshot):
        """A row attached to the origin after capture aborts the merge."""
        mock_uow.transactions.list_referencing = AsyncMock(
            return_value=[
                make_transaction(10, "Pago", from_ref=SITE_1),
                make_transaction(11, "Late payment", to_ref=SITE_1),
            ]
        )
        mock_uow.trips.list_by_link = AsyncMock(return_value=[])

        with pytest.raises(ConflictingStateError) as exc_info:
            await rewriter_for(PartnerKind.SITE, mock_uow).forward(site_snapshot, DESTINATION)

        assert exc_info.value.error_code == "CONFLICTING_STATE"
        mock_uow.transactions.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_forward_rejects_other_kind(self, mock_uow, site_snapshot):
        buyer = Partner(id=2, kind=PartnerKind.BUYER, name="Hormigones Sur")

        with pytest.raises(ValueError):
            await rewriter_for(PartnerKind.SITE, mock_uow).forward(site_snapshot, buyer)


class TestBackward:
    """Test restoring references to the origin."""

    @pytest.mark.asyncio
    async def test_backward_restores_and_skips_deleted_rows(self, mock_uow, site_snapshot):
        transaction = make_transaction(
            10, "Pago Cantera Norte S.A.", from_ref=SITE_2, to_ref=BUYER_5
        )
        trip = Trip(id=20, site_id=2, buyer_id=5)
        mock_uow.transactions.get_many = AsyncMock(return_value=[transaction])
        mock_uow.trips.get_many = AsyncMock(return_value=[trip])  # trip 21 was deleted

        counts = await rewriter_for(PartnerKind.SITE, mock_uow).backward(site_snapshot)

        assert counts == RewriteCounts(transactions=1, trips=1)
        assert transaction.from_ref == SITE_1
        assert transaction.to_ref == BUYER_5
        assert transaction.concept == "Pago Cantera Norte"
        assert trip.site_id == 1
        mock_uow.trips.get_many.assert_called_once_with([20, 21])

    @pytest.mark.asyncio
    async def test_backward_twice_is_stable(self, mock_uow, site_snapshot):
        transaction = make_transaction(10, "Pago Cantera Norte S.A.", from_ref=SITE_2)
        trip = Trip(id=20, site_id=2)
        mock_uow.transactions.get_many = AsyncMock(return_value=[transaction])
        mock_uow.trips.get_many = AsyncMock(return_value=[trip])
        rewriter = rewriter_for(PartnerKind.SITE, mock_uow)

        await rewriter.backward(site_snapshot)
        first = (transaction.from_ref, transaction.concept, trip.site_id)
        await rewriter.backward(site_snapshot)

        assert (transaction.from_ref, transaction.concept, trip.site_id) == first
