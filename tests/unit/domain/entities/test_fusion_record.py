"""Unit tests for FusionRecord entity."""

from datetime import UTC, datetime

import pytest

from haulbook.domain.entities.fusion_record import FusionRecord
from haulbook.domain.exceptions import FusionAlreadyRevertedError
from haulbook.domain.value_objects.fusion_snapshot import FusionSnapshot
from haulbook.domain.value_objects.partner_kind import PartnerKind


def make_record(**overrides) -> FusionRecord:
    fields = {
        "id": 1,
        "kind": PartnerKind.SITE,
        "origin_id": 1,
        "destination_id": 2,
        "origin_name": "Cantera Norte",
        "destination_name": "Cantera Norte S.A.",
        "snapshot": FusionSnapshot(kind=PartnerKind.SITE, origin={"id": 1, "name": "Cantera Norte"}),
        "transactions_affected": 2,
        "trips_affected": 3,
    }
    fields.update(overrides)
    return FusionRecord(**fields)


class TestFusionRecordValidation:
    def test_rejects_self_fusion(self):
        with pytest.raises(ValueError):
            make_record(destination_id=1)

    def test_rejects_negative_counts(self):
        with pytest.raises(ValueError):
            make_record(trips_affected=-1)

    def test_rejects_snapshot_of_other_kind(self):
        snapshot = FusionSnapshot(kind=PartnerKind.BUYER, origin={"id": 1, "name": "x"})
        with pytest.raises(ValueError):
            make_record(snapshot=snapshot)


class TestMarkReverted:
    def test_marks_reverted(self):
        record = make_record()
        when = datetime(2024, 4, 1, tzinfo=UTC)

        record.mark_reverted(when)

        assert record.reverted is True
        assert record.reverted_at == when

    def test_second_revert_fails(self):
        record = make_record()
        record.mark_reverted()

        with pytest.raises(FusionAlreadyRevertedError):
            record.mark_reverted()
