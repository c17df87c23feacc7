"""
Fusion snapshot value objects.

A snapshot is everything a merge needs to be undone: the origin partner's
full attribute row plus, for every transaction and trip the merge touched,
the linkage it had before the merge. Snapshots are serialised into the
fusion record row as a JSON document.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from haulbook.domain.exceptions import InvalidSnapshotError
from haulbook.domain.value_objects.counterparty_ref import CounterpartyRef, TransactionSide
from haulbook.domain.value_objects.partner_kind import PartnerKind

SNAPSHOT_VERSION = 1


class TripLinkField(str, Enum):
    """Trip column through which a partner is attributed."""

    SITE = "site_id"
    BUYER = "buyer_id"
    CONDUCTOR = "conductor"  # free-text hauler attribution

    @classmethod
    def for_kind(cls, kind: PartnerKind) -> "TripLinkField":
        """Column through which trips are attributed to partners of ``kind``."""
        return _TRIP_FIELD_BY_KIND[kind]


_TRIP_FIELD_BY_KIND = {
    PartnerKind.SITE: TripLinkField.SITE,
    PartnerKind.BUYER: TripLinkField.BUYER,
    PartnerKind.HAULER: TripLinkField.CONDUCTOR,
}


@dataclass(frozen=True)
class TransactionLink:
    """A transaction that referenced the origin, and on which side(s)."""

    transaction_id: int
    sides: tuple[TransactionSide, ...]
    concept: str

    def __post_init__(self) -> None:
        if not self.sides:
            raise ValueError("Transaction link must name at least one side")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.transaction_id,
            "sides": [side.value for side in self.sides],
            "concept": self.concept,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TransactionLink":
        return cls(
            transaction_id=int(data["id"]),
            sides=tuple(TransactionSide(side) for side in data["sides"]),
            concept=data["concept"],
        )


@dataclass(frozen=True)
class TripLink:
    """A trip that was attributed to the origin, with the value it held."""

    trip_id: int
    field: TripLinkField
    original_value: int | str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.trip_id,
            "field": self.field.value,
            "original_value": self.original_value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TripLink":
        field = TripLinkField(data["field"])
        value = data["original_value"]
        if field is not TripLinkField.CONDUCTOR:
            value = int(value)
        elif not isinstance(value, str):
            raise ValueError("conductor links must hold a string")
        return cls(trip_id=int(data["id"]), field=field, original_value=value)


@dataclass(frozen=True)
class FusionSnapshot:
    """
    Immutable pre-merge state of an origin partner and its references.

    Attributes:
        kind: Partner kind of the origin
        origin: Full attribute row of the origin partner (JSON-friendly)
        transactions: Transactions that referenced the origin
        trips: Trips that were attributed to the origin
    """

    kind: PartnerKind
    origin: dict[str, Any]
    transactions: tuple[TransactionLink, ...] = ()
    trips: tuple[TripLink, ...] = ()

    def __post_init__(self) -> None:
        if "id" not in self.origin or "name" not in self.origin:
            raise InvalidSnapshotError("origin row must carry id and name")

    @property
    def origin_id(self) -> int:
        return int(self.origin["id"])

    @property
    def origin_name(self) -> str:
        return self.origin["name"]

    @property
    def origin_ref(self) -> CounterpartyRef:
        """Reference transactions used for the origin before the merge."""
        return CounterpartyRef.for_partner(self.kind.value, self.origin_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": SNAPSHOT_VERSION,
            "kind": self.kind.value,
            "origin": dict(self.origin),
            "transactions": [link.to_dict() for link in self.transactions],
            "trips": [link.to_dict() for link in self.trips],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FusionSnapshot":
        """
        Rebuild a snapshot from its stored JSON document.

        Raises:
            InvalidSnapshotError: If the document is malformed
        """
        if not isinstance(data, dict):
            raise InvalidSnapshotError("document is not an object")

        version = data.get("version", SNAPSHOT_VERSION)
        if version != SNAPSHOT_VERSION:
            raise InvalidSnapshotError(f"unsupported version {version}")

        try:
            return cls(
                kind=PartnerKind(data["kind"]),
                origin=dict(data["origin"]),
                transactions=tuple(
                    TransactionLink.from_dict(item) for item in data.get("transactions", [])
                ),
                trips=tuple(TripLink.from_dict(item) for item in data.get("trips", [])),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidSnapshotError(str(e)) from e
