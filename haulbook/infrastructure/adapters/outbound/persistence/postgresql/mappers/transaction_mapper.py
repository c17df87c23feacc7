"""Mapper between Transaction domain entity and TransactionModel."""

from typing import Optional

from haulbook.domain.entities.transaction import Transaction
from haulbook.domain.value_objects.counterparty_ref import CounterpartyRef
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.transaction_model import (
    TransactionModel,
)


def _ref(kind: Optional[str], ref_id: Optional[str]) -> Optional[CounterpartyRef]:
    # Half-filled pairs are treated as no counterparty
    if not kind or not ref_id:
        return None
    return CounterpartyRef(kind=kind, id=ref_id)


class TransactionMapper:
    """Mapper between Transaction entity and TransactionModel."""

    @staticmethod
    def to_entity(model: TransactionModel) -> Transaction:
        return Transaction(
            id=model.id,
            value=model.value,
            concept=model.concept,
            occurred_at=model.occurred_at,
            from_ref=_ref(model.from_kind, model.from_id),
            to_ref=_ref(model.to_kind, model.to_id),
            created_at=model.created_at,
        )

    @staticmethod
    def to_model(
        entity: Transaction, existing_model: Optional[TransactionModel] = None
    ) -> TransactionModel:
        model = existing_model or TransactionModel()
        if existing_model is None and entity.id is not None:
            model.id = entity.id

        model.value = entity.value
        model.concept = entity.concept
        model.occurred_at = entity.occurred_at
        model.from_kind = entity.from_ref.kind if entity.from_ref else None
        model.from_id = entity.from_ref.id if entity.from_ref else None
        model.to_kind = entity.to_ref.kind if entity.to_ref else None
        model.to_id = entity.to_ref.id if entity.to_ref else None
        if entity.created_at is not None:
            model.created_at = entity.created_at

        return model
