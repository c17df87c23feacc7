"""Unit tests for RevertFusionUseCase."""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from haulbook.application.exceptions import (
    AlreadyRevertedError,
    ConflictingStateError,
    NotFoundError,
)
from haulbook.application.use_cases.fusion.revert_fusion import RevertFusionUseCase
from haulbook.domain.entities.fusion_record import FusionRecord
from haulbook.domain.entities.partner import Partner
from haulbook.domain.entities.transaction import Transaction
from haulbook.domain.value_objects.counterparty_ref import CounterpartyRef, TransactionSide
from haulbook.domain.value_objects.fusion_snapshot import (
    FusionSnapshot,
    TransactionLink,
    TripLink,
    TripLinkField,
)
from haulbook.domain.value_objects.partner_kind import PartnerKind

ORIGIN = Partner(id=1, kind=PartnerKind.SITE, name="Cantera Norte", balance=Decimal("120"))


def make_record(**overrides) -> FusionRecord:
    fields = {
        "id": 10,
        "kind": PartnerKind.SITE,
        "origin_id": 1,
        "destination_id": 2,
        "origin_name": "Cantera Norte",
        "destination_name": "Cantera Norte S.A.",
        "snapshot": FusionSnapshot(
            kind=PartnerKind.SITE,
            origin=ORIGIN.to_snapshot(),
            transactions=(TransactionLink(5, (TransactionSide.FROM,), "Pago Cantera Norte"),),
            trips=(TripLink(7, TripLinkField.SITE, 1),),
        ),
        "transactions_affected": 1,
        "trips_affected": 1,
    }
    fields.update(overrides)
    return FusionRecord(**fields)


@pytest.fixture
def balance_hook():
    hook = Mock()
    hook.request_recalculation = AsyncMock()
    return hook


@pytest.fixture
def transaction():
    return Transaction(
        id=5,
        value=Decimal("300"),
        concept="Pago Cantera Norte S.A.",
        occurred_at=datetime(2024, 3, 1, tzinfo=UTC),
        from_ref=CounterpartyRef("site", "2"),
        to_ref=CounterpartyRef("buyer", "9"),
    )


@pytest.fixture
def revert_uow(mock_uow, transaction):
    """Mock Unit of Work for a fusion whose only trip was deleted since."""
    mock_uow.fusion_records.get_for_update = AsyncMock(return_value=make_record())
    mock_uow.fusion_records.mark_reverted = AsyncMock(return_value=True)
    mock_uow.partners.exists = AsyncMock(return_value=False)
    mock_uow.partners.add = AsyncMock(side_effect=lambda partner: partner)
    mock_uow.transactions.get_many = AsyncMock(return_value=[transaction])
    mock_uow.trips.get_many = AsyncMock(return_value=[])
    return mock_uow


class TestRevertFusionUseCase:
    """Test RevertFusionUseCase."""

    @pytest.mark.asyncio
    async def test_revert_success(self, revert_uow, transaction, balance_hook):
        use_case = RevertFusionUseCase(revert_uow, balance_hook)

        result = await use_case.execute(10)

        assert result.fusion_id == 10
        assert result.entity_restored == "Site: Cantera Norte"
        assert result.transactions_restored == 1
        assert result.trips_restored == 0

        restored = revert_uow.partners.add.call_args.args[0]
        assert restored == ORIGIN

        assert transaction.from_ref == CounterpartyRef("site", "1")
        assert transaction.concept == "Pago Cantera Norte"

        revert_uow.fusion_records.mark_reverted.assert_called_once()
        revert_uow.commit.assert_called_once()
        balance_hook.request_recalculation.assert_called_once_with(PartnerKind.SITE, [1, 2])

    @pytest.mark.asyncio
    async def test_revert_not_found(self, mock_uow, balance_hook):
        mock_uow.fusion_records.get_for_update = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError):
            await RevertFusionUseCase(mock_uow, balance_hook).execute(404)

        balance_hook.request_recalculation.assert_not_called()

    @pytest.mark.asyncio
    async def test_revert_already_reverted(self, revert_uow, balance_hook):
        revert_uow.fusion_records.get_for_update = AsyncMock(
            return_value=make_record(reverted=True, reverted_at=datetime.now(UTC))
        )

        with pytest.raises(AlreadyRevertedError) as exc_info:
            await RevertFusionUseCase(revert_uow, balance_hook).execute(10)

        assert exc_info.value.error_code == "ALREADY_REVERTED"
        assert exc_info.value.details["fusion_id"] == 10
        revert_uow.partners.add.assert_not_called()
        revert_uow.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_revert_origin_id_taken(self, revert_uow, balance_hook):
        """Test revert refuses to overwrite a partner holding the origin id."""
        revert_uow.partners.exists = AsyncMock(return_value=True)

        with pytest.raises(ConflictingStateError):
            await RevertFusionUseCase(revert_uow, balance_hook).execute(10)

        revert_uow.partners.add.assert_not_called()
        revert_uow.fusion_records.mark_reverted.assert_not_called()

    @pytest.mark.asyncio
    async def test_revert_lost_race(self, revert_uow, balance_hook):
        """Test the conditional ledger flip losing to a concurrent revert."""
        revert_uow.fusion_records.mark_reverted = AsyncMock(return_value=False)

        with pytest.raises(AlreadyRevertedError):
            await RevertFusionUseCase(revert_uow, balance_hook).execute(10)

        revert_uow.commit.assert_not_called()
        balance_hook.request_recalculation.assert_not_called()
