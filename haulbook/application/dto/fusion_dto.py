"""Fusion DTOs (Data Transfer Objects)."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from haulbook.domain.entities.fusion_record import FusionRecord
from haulbook.domain.value_objects.partner_kind import PartnerKind


class MergeEntitiesInput(BaseModel):
    """Input DTO for merging two partners of the same kind."""

    kind: PartnerKind = Field(..., description="Partner kind of both records")
    origin_id: int = Field(..., gt=0, description="Partner that disappears")
    destination_id: int = Field(..., gt=0, description="Partner that absorbs the origin")
    performed_by: Optional[str] = Field(
        None, max_length=100, description="Operator requesting the merge"
    )

    model_config = {"frozen": True}


class MergeResultOutput(BaseModel):
    """Output DTO for a completed merge."""

    fusion_id: int = Field(..., description="Ledger record created for this merge")
    transactions_transferred: int = Field(..., description="Transactions re-pointed")
    trips_transferred: int = Field(..., description="Trips re-pointed")

    model_config = {"frozen": True}


class RevertResultOutput(BaseModel):
    """Output DTO for a completed revert."""

    fusion_id: int = Field(..., description="Reverted ledger record")
    entity_restored: str = Field(..., description="Restored partner, e.g. 'Site: Cantera Norte'")
    transactions_restored: int = Field(..., description="Transactions pointed back")
    trips_restored: int = Field(..., description="Trips pointed back")

    model_config = {"frozen": True}


class FusionSummaryOutput(BaseModel):
    """Output DTO for one line of fusion history."""

    fusion_id: int = Field(..., description="Ledger record id")
    kind: PartnerKind = Field(..., description="Partner kind")
    origin_id: int = Field(..., description="Id the origin had (and regains on revert)")
    destination_id: int = Field(..., description="Id of the absorbing partner")
    origin_name: str = Field(..., description="Origin name at merge time")
    destination_name: str = Field(..., description="Destination name at merge time")
    fused_at: datetime = Field(..., description="When the merge happened")
    reverted: bool = Field(..., description="Whether the merge was undone")
    reverted_at: Optional[datetime] = Field(None, description="When it was undone")
    transactions_affected: int = Field(..., description="Transactions moved by the merge")
    trips_affected: int = Field(..., description="Trips moved by the merge")
    performed_by: Optional[str] = Field(None, description="Operator that merged")

    model_config = {"frozen": True, "from_attributes": True}

    @classmethod
    def from_entity(cls, record: FusionRecord) -> "FusionSummaryOutput":
        """
        Create DTO from FusionRecord entity.

        Args:
            record: FusionRecord domain entity

        Returns:
            FusionSummaryOutput DTO
        """
        return cls(**_summary_fields(record))


class FusionDetailOutput(FusionSummaryOutput):
    """Output DTO for a single fusion including its stored snapshot."""

    snapshot: dict[str, Any] = Field(..., description="Captured pre-merge state")

    @classmethod
    def from_entity(cls, record: FusionRecord) -> "FusionDetailOutput":
        return cls(**_summary_fields(record), snapshot=record.snapshot.to_dict())


class FusionHistoryOutput(BaseModel):
    """Output DTO for a page of fusion history."""

    items: list[FusionSummaryOutput] = Field(..., description="Records, most recent first")
    total: int = Field(..., description="Total number of matching records")
    page: int = Field(..., description="Current page number")
    page_size: int = Field(..., description="Number of items per page")

    model_config = {"frozen": True}


def _summary_fields(record: FusionRecord) -> dict[str, Any]:
    return {
        "fusion_id": record.id,
        "kind": record.kind,
        "origin_id": record.origin_id,
        "destination_id": record.destination_id,
        "origin_name": record.origin_name,
        "destination_name": record.destination_name,
        "fused_at": record.fused_at,
        "reverted": record.reverted,
        "reverted_at": record.reverted_at,
        "transactions_affected": record.transactions_affected,
        "trips_affected": record.trips_affected,
        "performed_by": record.performed_by,
    }
