"""Partner domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from haulbook.domain.value_objects.counterparty_ref import CounterpartyRef
from haulbook.domain.value_objects.fusion_snapshot import TripLinkField
from haulbook.domain.value_objects.partner_kind import PartnerKind


@dataclass
class Partner:
    """
    A business partner: supply site, buyer or hauler.

    The balance is derived elsewhere from transactions and trips; this
    subsystem only carries it so a reverted merge can restore the row
    verbatim. ``defaults`` holds kind-specific price and freight defaults as
    an opaque payload.
    """

    id: int | None
    kind: PartnerKind
    name: str
    balance: Decimal = Decimal("0")
    balance_stale: bool = False
    last_recalculated_at: datetime | None = None
    defaults: dict[str, Any] = field(default_factory=dict)
    plate: str | None = None  # haulers only
    owner_id: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate partner after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Partner name cannot be empty")

        if len(self.name) > 200:
            raise ValueError("Partner name cannot exceed 200 characters")

        if not isinstance(self.balance, Decimal):
            self.balance = Decimal(str(self.balance))

    @property
    def display_label(self) -> str:
        """Label shown to operators, e.g. ``Site: Cantera Norte``."""
        return f"{self.kind.label}: {self.name}"

    def reference(self) -> CounterpartyRef:
        """
        Reference transactions use to point at this partner.

        Raises:
            ValueError: If the partner has not been persisted yet
        """
        if self.id is None:
            raise ValueError("Unsaved partner has no reference")
        return CounterpartyRef.for_partner(self.kind.value, self.id)

    def trip_attribution(self) -> tuple[TripLinkField, int | str]:
        """
        Column and value that attribute a trip to this partner.

        Sites and buyers are matched by id; haulers by their exact name.
        """
        field = TripLinkField.for_kind(self.kind)
        if field is TripLinkField.CONDUCTOR:
            return field, self.name
        if self.id is None:
            raise ValueError("Unsaved partner has no trip attribution")
        return field, self.id

    def to_snapshot(self) -> dict[str, Any]:
        """
        Serialise every stored attribute into a JSON-friendly dict.

        Returns:
            Dict that ``from_snapshot`` turns back into an equal partner
        """
        return {
            "id": self.id,
            "name": self.name,
            "balance": str(self.balance),
            "balance_stale": self.balance_stale,
            "last_recalculated_at": (
                self.last_recalculated_at.isoformat() if self.last_recalculated_at else None
            ),
            "defaults": dict(self.defaults),
            "plate": self.plate,
            "owner_id": self.owner_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_snapshot(cls, kind: PartnerKind, data: dict[str, Any]) -> "Partner":
        """
        Rebuild a partner from ``to_snapshot`` output.

        Args:
            kind: Partner kind the snapshot was taken for
            data: Snapshot attribute dict

        Returns:
            Partner carrying the original id and attributes
        """
        last_recalculated_at = data.get("last_recalculated_at")
        created_at = data.get("created_at")
        return cls(
            id=int(data["id"]),
            kind=kind,
            name=data["name"],
            balance=Decimal(data.get("balance") or "0"),
            balance_stale=bool(data.get("balance_stale", False)),
            last_recalculated_at=(
                datetime.fromisoformat(last_recalculated_at) if last_recalculated_at else None
            ),
            defaults=dict(data.get("defaults") or {}),
            plate=data.get("plate"),
            owner_id=data.get("owner_id"),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )
