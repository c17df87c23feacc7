"""Mapper between Trip domain entity and TripModel."""

from typing import Optional

from haulbook.domain.entities.trip import Trip
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.trip_model import (
    TripModel,
)


class TripMapper:
    """Mapper between Trip entity and TripModel."""

    @staticmethod
    def to_entity(model: TripModel) -> Trip:
        return Trip(
            id=model.id,
            conductor=model.conductor,
            plate=model.plate,
            site_id=model.site_id,
            buyer_id=model.buyer_id,
            vehicle_type=model.vehicle_type,
            weight=model.weight,
            loaded_at=model.loaded_at,
            created_at=model.created_at,
        )

    @staticmethod
    def to_model(entity: Trip, existing_model: Optional[TripModel] = None) -> TripModel:
        model = existing_model or TripModel()
        if existing_model is None and entity.id is not None:
            model.id = entity.id

        model.conductor = entity.conductor
        model.plate = entity.plate
        model.site_id = entity.site_id
        model.buyer_id = entity.buyer_id
        model.vehicle_type = entity.vehicle_type
        model.weight = entity.weight
        model.loaded_at = entity.loaded_at
        if entity.created_at is not None:
            model.created_at = entity.created_at

        return model
