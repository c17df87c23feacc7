"""
Mapper between Partner domain entity and the three partner models.

The partner kind is not a column: it is implied by which table (model
class) the row lives in.
"""

from typing import Optional

from haulbook.domain.entities.partner import Partner
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.partner_model import (
    PARTNER_MODELS,
    HaulerModel,
    PartnerModel,
)

_KIND_BY_MODEL = {model: kind for kind, model in PARTNER_MODELS.items()}


class PartnerMapper:
    """Mapper between Partner entity and SiteModel / BuyerModel / HaulerModel."""

    @staticmethod
    def to_entity(model: PartnerModel) -> Partner:
        """
        Convert SQLAlchemy model to domain entity.

        Args:
            model: Partner row of any kind

        Returns:
            Partner domain entity
        """
        return Partner(
            id=model.id,
            kind=_KIND_BY_MODEL[type(model)],
            name=model.name,
            balance=model.balance,
            balance_stale=model.balance_stale,
            last_recalculated_at=model.last_recalculated_at,
            defaults=dict(model.defaults or {}),
            plate=model.plate if isinstance(model, HaulerModel) else None,
            owner_id=model.owner_id,
            created_at=model.created_at,
        )

    @staticmethod
    def to_model(entity: Partner, existing_model: Optional[PartnerModel] = None) -> PartnerModel:
        """
        Convert domain entity to SQLAlchemy model.

        Args:
            entity: Partner domain entity
            existing_model: Optional existing model to update

        Returns:
            Model of the table matching ``entity.kind``
        """
        model_class = PARTNER_MODELS[entity.kind]
        if existing_model is not None:
            model = existing_model
        else:
            model = model_class()
            if entity.id is not None:
                model.id = entity.id

        model.name = entity.name
        model.balance = entity.balance
        model.balance_stale = entity.balance_stale
        model.last_recalculated_at = entity.last_recalculated_at
        model.defaults = dict(entity.defaults)
        model.owner_id = entity.owner_id
        if entity.created_at is not None:
            model.created_at = entity.created_at
        if isinstance(model, HaulerModel):
            model.plate = entity.plate

        return model
