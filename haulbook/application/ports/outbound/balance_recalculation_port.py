"""Balance recalculation port interface."""

from typing import Protocol, Sequence

from haulbook.domain.value_objects.partner_kind import PartnerKind


class BalanceRecalculationPort(Protocol):
    """
    Hook into the external balance computation.

    Called after a merge or revert has committed. Implementations must not
    raise: the consolidation has already happened and cannot be undone by a
    failing hook.
    """

    async def request_recalculation(
        self, kind: PartnerKind, partner_ids: Sequence[int]
    ) -> None:
        """Ask for the balances of the given partners to be recomputed."""
        ...
