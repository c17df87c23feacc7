"""Unit tests for Partner entity."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from haulbook.domain.entities.partner import Partner
from haulbook.domain.value_objects.counterparty_ref import CounterpartyRef
from haulbook.domain.value_objects.fusion_snapshot import TripLinkField
from haulbook.domain.value_objects.partner_kind import PartnerKind


class TestPartnerCreation:
    """Test Partner validation."""

    def test_balance_is_coerced_to_decimal(self):
        partner = Partner(id=1, kind=PartnerKind.SITE, name="Cantera Norte", balance="12.50")  # type: ignore
        assert partner.balance == Decimal("12.50")

    @pytest.mark.parametrize("name", ["", "   ", "x" * 201])
    def test_rejects_invalid_name(self, name):
        with pytest.raises(ValueError):
            Partner(id=1, kind=PartnerKind.SITE, name=name)


class TestPartnerReferences:
    """Test how transactions and trips refer to a partner."""

    def test_display_label(self):
        partner = Partner(id=1, kind=PartnerKind.SITE, name="Cantera Norte")
        assert partner.display_label == "Site: Cantera Norte"

    def test_reference(self):
        partner = Partner(id=7, kind=PartnerKind.BUYER, name="Hormigones Sur")
        assert partner.reference() == CounterpartyRef("buyer", "7")

    def test_reference_requires_id(self):
        with pytest.raises(ValueError):
            Partner(id=None, kind=PartnerKind.BUYER, name="Unsaved").reference()

    def test_site_trips_attributed_by_id(self):
        partner = Partner(id=4, kind=PartnerKind.SITE, name="Cantera Norte")
        assert partner.trip_attribution() == (TripLinkField.SITE, 4)

    def test_hauler_trips_attributed_by_name(self):
        partner = Partner(id=4, kind=PartnerKind.HAULER, name="J. Perez", plate="ABC123")
        assert partner.trip_attribution() == (TripLinkField.CONDUCTOR, "J. Perez")


class TestPartnerSnapshot:
    """Test the attribute row stored in fusion snapshots."""

    def test_snapshot_restores_every_attribute(self):
        partner = Partner(
            id=9,
            kind=PartnerKind.HAULER,
            name="J. Perez",
            balance=Decimal("-35.20"),
            balance_stale=True,
            last_recalculated_at=datetime(2024, 2, 1, 8, 30, tzinfo=UTC),
            defaults={"freight_per_ton": "4.50"},
            plate="ABC123",
            owner_id="tenant-1",
            created_at=datetime(2023, 12, 24, tzinfo=UTC),
        )

        restored = Partner.from_snapshot(PartnerKind.HAULER, partner.to_snapshot())

        assert restored == partner

    def test_snapshot_is_json_friendly(self):
        partner = Partner(id=2, kind=PartnerKind.SITE, name="Cantera Norte", balance=Decimal("5"))
        data = partner.to_snapshot()

        assert data["balance"] == "5"
        assert data["created_at"] is None
        assert data["defaults"] == {}
