"""Typed counterparty reference carried by transactions."""

from dataclasses import dataclass
from enum import Enum


class TransactionSide(str, Enum):
    """Side of a transaction that holds a counterparty reference."""

    FROM = "from"
    TO = "to"


@dataclass(frozen=True)
class CounterpartyRef:
    """
    Reference to the party on one side of a transaction.

    Stored as a (kind, id) text pair. For partners the kind is a PartnerKind
    value and the id is the partner's integer id rendered as text; other
    counterparties (bank, cash, ...) use their own kind strings.
    """

    kind: str
    id: str

    def __post_init__(self) -> None:
        if not self.kind:
            raise ValueError("Counterparty kind cannot be empty")
        if not self.id:
            raise ValueError("Counterparty id cannot be empty")

    @classmethod
    def for_partner(cls, kind: str, partner_id: int) -> "CounterpartyRef":
        """Build the reference a transaction uses to point at a partner."""
        return cls(kind=str(kind), id=str(partner_id))

    def __str__(self) -> str:
        return f"{self.kind}:{self.id}"
