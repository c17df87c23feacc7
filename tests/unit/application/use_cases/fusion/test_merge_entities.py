"""Unit tests for MergeEntitiesUseCase."""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from haulbook.application.dto.fusion_dto import MergeEntitiesInput
from haulbook.application.exceptions import (
    ConflictingStateError,
    InvalidMergeError,
    NotFoundError,
)
from haulbook.application.use_cases.fusion.merge_entities import MergeEntitiesUseCase
from haulbook.domain.entities.partner import Partner
from haulbook.domain.entities.transaction import Transaction
from haulbook.domain.entities.trip import Trip
from haulbook.domain.value_objects.counterparty_ref import CounterpartyRef
from haulbook.domain.value_objects.partner_kind import PartnerKind

ORIGIN = Partner(id=1, kind=PartnerKind.SITE, name="Cantera Norte", balance=Decimal("120"))
DESTINATION = Partner(id=2, kind=PartnerKind.SITE, name="Cantera Norte S.A.")


def assign_id(record):
    record.id = 10
    return record


@pytest.fixture
def balance_hook():
    hook = Mock()
    hook.request_recalculation = AsyncMock()
    return hook


@pytest.fixture
def merge_input():
    return MergeEntitiesInput(
        kind=PartnerKind.SITE, origin_id=1, destination_id=2, performed_by="op-1"
    )


@pytest.fixture
def site_uow(mock_uow):
    """Mock Unit of Work holding two sites, one transaction and two trips."""
    partners = {1: ORIGIN, 2: DESTINATION}
    mock_uow.partners.get_for_update = AsyncMock(
        side_effect=lambda kind, partner_id: partners.get(partner_id)
    )
    mock_uow.partners.delete = AsyncMock(return_value=True)
    mock_uow.transactions.list_referencing = AsyncMock(
        return_value=[
            Transaction(
                id=5,
                value=Decimal("300"),
                concept="Pago Cantera Norte",
                occurred_at=datetime(2024, 3, 1, tzinfo=UTC),
                from_ref=CounterpartyRef("site", "1"),
                to_ref=CounterpartyRef("buyer", "9"),
            )
        ]
    )
    mock_uow.trips.list_by_link = AsyncMock(
        return_value=[Trip(id=7, site_id=1, buyer_id=9), Trip(id=8, site_id=1, buyer_id=9)]
    )
    mock_uow.fusion_records.add = AsyncMock(side_effect=assign_id)
    return mock_uow


class TestMergeEntitiesUseCase:
    """Test MergeEntitiesUseCase."""

    @pytest.mark.asyncio
    async def test_merge_success(self, site_uow, merge_input, balance_hook):
        """Test a merge moves references, deletes the origin and records the fusion."""
        use_case = MergeEntitiesUseCase(site_uow, balance_hook)

        result = await use_case.execute(merge_input)

        assert result.fusion_id == 10
        assert result.transactions_transferred == 1
        assert result.trips_transferred == 2

        site_uow.partners.delete.assert_called_once_with(PartnerKind.SITE, 1)
        site_uow.commit.assert_called_once()

        record = site_uow.fusion_records.add.call_args.args[0]
        assert record.origin_id == 1
        assert record.destination_id == 2
        assert record.performed_by == "op-1"
        assert record.snapshot.origin["balance"] == "120"
        assert [link.trip_id for link in record.snapshot.trips] == [7, 8]

        balance_hook.request_recalculation.assert_called_once_with(PartnerKind.SITE, [2])

    @pytest.mark.asyncio
    async def test_merge_locks_in_id_order(self, site_uow, balance_hook):
        """Both partners are locked lowest id first, whatever the direction."""
        site_uow.transactions.list_referencing = AsyncMock(return_value=[])
        site_uow.trips.list_by_link = AsyncMock(return_value=[])
        use_case = MergeEntitiesUseCase(site_uow, balance_hook)

        await use_case.execute(
            MergeEntitiesInput(kind=PartnerKind.SITE, origin_id=2, destination_id=1)
        )

        locked = [call.args[1] for call in site_uow.partners.get_for_update.call_args_list]
        assert locked[:2] == [1, 2]

    @pytest.mark.asyncio
    async def test_merge_into_itself(self, mock_uow, balance_hook):
        """Test self-merge is rejected before anything is read."""
        use_case = MergeEntitiesUseCase(mock_uow, balance_hook)

        with pytest.raises(InvalidMergeError) as exc_info:
            await use_case.execute(
                MergeEntitiesInput(kind=PartnerKind.BUYER, origin_id=3, destination_id=3)
            )

        assert exc_info.value.error_code == "INVALID_MERGE"
        mock_uow.__aenter__.assert_not_called()
        mock_uow.commit.assert_not_called()
        balance_hook.request_recalculation.assert_not_called()

    @pytest.mark.asyncio
    async def test_merge_destination_not_found(self, mock_uow, balance_hook):
        mock_uow.partners.get_for_update = AsyncMock(
            side_effect=lambda kind, partner_id: ORIGIN if partner_id == 1 else None
        )
        mock_uow.partners.delete = AsyncMock()
        use_case = MergeEntitiesUseCase(mock_uow, balance_hook)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                MergeEntitiesInput(kind=PartnerKind.SITE, origin_id=1, destination_id=2)
            )

        assert exc_info.value.details == {"resource_type": "Site", "resource_id": "2"}
        mock_uow.partners.delete.assert_not_called()
        mock_uow.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_merge_origin_vanished(self, site_uow, merge_input, balance_hook):
        """Test a concurrent delete of the origin aborts the merge."""
        site_uow.partners.delete = AsyncMock(return_value=False)
        use_case = MergeEntitiesUseCase(site_uow, balance_hook)

        with pytest.raises(ConflictingStateError):
            await use_case.execute(merge_input)

        site_uow.fusion_records.add.assert_not_called()
        site_uow.commit.assert_not_called()
        balance_hook.request_recalculation.assert_not_called()

    @pytest.mark.asyncio
    async def test_merge_without_balance_hook(self, site_uow, merge_input):
        result = await MergeEntitiesUseCase(site_uow).execute(merge_input)
        assert result.fusion_id == 10
