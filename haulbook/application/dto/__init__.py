"""Data Transfer Objects for the application layer."""

from haulbook.application.dto.fusion_dto import (
    FusionDetailOutput,
    FusionHistoryOutput,
    FusionSummaryOutput,
    MergeEntitiesInput,
    MergeResultOutput,
    RevertResultOutput,
)

__all__ = [
    "FusionDetailOutput",
    "FusionHistoryOutput",
    "FusionSummaryOutput",
    "MergeEntitiesInput",
    "MergeResultOutput",
    "RevertResultOutput",
]
