"""Transaction domain entity."""

import re
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from haulbook.domain.value_objects.counterparty_ref import CounterpartyRef, TransactionSide


@dataclass
class Transaction:
    """
    A monetary movement between two counterparties.

    Either side may be empty (e.g. a cash withdrawal only has a *from*).
    """

    id: int | None
    value: Decimal
    concept: str
    occurred_at: datetime
    from_ref: CounterpartyRef | None = None
    to_ref: CounterpartyRef | None = None
    created_at: datetime | None = None

    def sides_referencing(self, ref: CounterpartyRef) -> tuple[TransactionSide, ...]:
        """
        Return the sides whose reference equals ``ref``.

        Args:
            ref: Counterparty reference to look for

        Returns:
            Tuple of matching sides, empty when neither side matches
        """
        sides = []
        if self.from_ref == ref:
            sides.append(TransactionSide.FROM)
        if self.to_ref == ref:
            sides.append(TransactionSide.TO)
        return tuple(sides)

    def relink(self, sides: tuple[TransactionSide, ...], ref: CounterpartyRef) -> None:
        """Point the given sides at ``ref``; other sides are left alone."""
        for side in sides:
            if side is TransactionSide.FROM:
                self.from_ref = ref
            else:
                self.to_ref = ref

    def rename_in_concept(self, old_name: str, new_name: str) -> None:
        """
        Replace occurrences of a partner name inside the concept text.

        Matching is literal and case-insensitive.
        """
        if not old_name or not self.concept:
            return
        self.concept = re.sub(
            re.escape(old_name), lambda _: new_name, self.concept, flags=re.IGNORECASE
        )
