"""
Mapper between FusionRecord domain entity and FusionRecordModel.

The snapshot value object is stored as its JSON document.
"""

from typing import Optional

from haulbook.domain.entities.fusion_record import FusionRecord
from haulbook.domain.value_objects.fusion_snapshot import FusionSnapshot
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.fusion_record_model import (
    FusionRecordModel,
)


class FusionRecordMapper:
    """Mapper between FusionRecord entity and FusionRecordModel."""

    @staticmethod
    def to_entity(model: FusionRecordModel) -> FusionRecord:
        """
        Convert SQLAlchemy model to domain entity.

        Raises:
            InvalidSnapshotError: If the stored snapshot is malformed
        """
        return FusionRecord(
            id=model.id,
            kind=model.partner_kind,
            origin_id=model.origin_id,
            destination_id=model.destination_id,
            origin_name=model.origin_name,
            destination_name=model.destination_name,
            snapshot=FusionSnapshot.from_dict(model.snapshot),
            transactions_affected=model.transactions_affected,
            trips_affected=model.trips_affected,
            performed_by=model.performed_by,
            fused_at=model.fused_at,
            reverted=model.reverted,
            reverted_at=model.reverted_at,
        )

    @staticmethod
    def to_model(
        entity: FusionRecord, existing_model: Optional[FusionRecordModel] = None
    ) -> FusionRecordModel:
        model = existing_model or FusionRecordModel()
        if existing_model is None and entity.id is not None:
            model.id = entity.id

        model.partner_kind = entity.kind
        model.origin_id = entity.origin_id
        model.destination_id = entity.destination_id
        model.origin_name = entity.origin_name
        model.destination_name = entity.destination_name
        model.snapshot = entity.snapshot.to_dict()
        model.transactions_affected = entity.transactions_affected
        model.trips_affected = entity.trips_affected
        model.performed_by = entity.performed_by
        if entity.fused_at is not None:
            model.fused_at = entity.fused_at
        model.reverted = entity.reverted
        model.reverted_at = entity.reverted_at

        return model
