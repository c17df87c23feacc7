"""
Dependency injection helpers for FastAPI.

The DatabaseConfig lives on ``app.state`` (created in the lifespan), so
nothing here relies on module-level globals.

Usage in routes:
    @router.post("/{kind}/merge")
    async def merge(
        ...,
        use_case: MergeEntitiesUseCase = Depends(get_merge_entities_use_case),
    ):
        ...
"""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from haulbook.application.ports.outbound.balance_recalculation_port import (
    BalanceRecalculationPort,
)
from haulbook.application.use_cases.fusion import (
    GetFusionUseCase,
    ListFusionHistoryUseCase,
    MergeEntitiesUseCase,
    RevertFusionUseCase,
)
from haulbook.infrastructure.adapters.outbound.balance.stale_flag_balance_hook import (
    StaleFlagBalanceHook,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.unit_of_work import (
    PostgresUnitOfWork,
)
from haulbook.infrastructure.config.database import DatabaseConfig


def get_db_config(request: Request) -> DatabaseConfig:
    """Return the DatabaseConfig created at startup."""
    return request.app.state.db_config


async def get_uow(
    db_config: DatabaseConfig = Depends(get_db_config),
) -> AsyncGenerator[PostgresUnitOfWork, None]:
    """Yield a Unit of Work bound to a fresh session, closed after the request."""
    session = db_config.get_session()
    try:
        yield PostgresUnitOfWork(session)
    finally:
        await session.close()


def get_balance_hook(
    db_config: DatabaseConfig = Depends(get_db_config),
) -> BalanceRecalculationPort:
    """Balance hook that writes through its own sessions."""
    return StaleFlagBalanceHook(db_config.session_factory)


def get_merge_entities_use_case(
    uow: PostgresUnitOfWork = Depends(get_uow),
    balance_hook: BalanceRecalculationPort = Depends(get_balance_hook),
) -> MergeEntitiesUseCase:
    return MergeEntitiesUseCase(uow, balance_hook)


def get_revert_fusion_use_case(
    uow: PostgresUnitOfWork = Depends(get_uow),
    balance_hook: BalanceRecalculationPort = Depends(get_balance_hook),
) -> RevertFusionUseCase:
    return RevertFusionUseCase(uow, balance_hook)


def get_list_fusion_history_use_case(
    uow: PostgresUnitOfWork = Depends(get_uow),
) -> ListFusionHistoryUseCase:
    return ListFusionHistoryUseCase(uow)


def get_get_fusion_use_case(
    uow: PostgresUnitOfWork = Depends(get_uow),
) -> GetFusionUseCase:
    return GetFusionUseCase(uow)
