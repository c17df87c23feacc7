"""Partner consolidation use cases."""

from haulbook.application.use_cases.fusion.get_fusion import GetFusionUseCase
from haulbook.application.use_cases.fusion.list_fusion_history import (
    ListFusionHistoryUseCase,
)
from haulbook.application.use_cases.fusion.merge_entities import MergeEntitiesUseCase
from haulbook.application.use_cases.fusion.revert_fusion import RevertFusionUseCase

__all__ = [
    "GetFusionUseCase",
    "ListFusionHistoryUseCase",
    "MergeEntitiesUseCase",
    "RevertFusionUseCase",
]
