"""Balance recalculation adapters."""

from haulbook.infrastructure.adapters.outbound.balance.stale_flag_balance_hook import (
    StaleFlagBalanceHook,
)

__all__ = ["StaleFlagBalanceHook"]
