"""
Balance recalculation hook backed by the partners' ``balance_stale`` flag.

Balances are computed by an external job that picks up flagged partners.
The hook runs after the merge or revert has committed, in its own session,
so a failure here never affects the consolidation itself.
"""

import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from haulbook.application.ports.outbound.balance_recalculation_port import (
    BalanceRecalculationPort,
)
from haulbook.domain.value_objects.partner_kind import PartnerKind
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.repositories.partner_repository import (
    PostgresPartnerRepository,
)

logger = logging.getLogger(__name__)


class StaleFlagBalanceHook(BalanceRecalculationPort):
    """Flags partners so their balances get recomputed."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize hook.

        Args:
            session_factory: Factory for the hook's own sessions
        """
        self.session_factory = session_factory

    async def request_recalculation(
        self, kind: PartnerKind, partner_ids: Sequence[int]
    ) -> None:
        """
        Flag the given partners as having a stale balance.

        Errors are logged, never raised.
        """
        try:
            async with self.session_factory() as session:
                flagged = await PostgresPartnerRepository(session).mark_balance_stale(
                    kind, partner_ids
                )
                await session.commit()
        except (SQLAlchemyError, OSError):
            logger.exception(
                f"Could not flag {kind.value} balances for recalculation: {list(partner_ids)}"
            )
            return

        logger.info(
            f"Flagged {flagged} {kind.value} balance(s) for recalculation",
            extra={"partner_kind": kind.value, "partner_ids": list(partner_ids)},
        )
