"""Application services composed by the fusion use cases."""

from haulbook.application.services.fusion_ledger import FusionLedger
from haulbook.application.services.reference_rewriter import (
    ConductorNameReferenceRewriter,
    ForeignKeyReferenceRewriter,
    ReferenceRewriter,
    RewriteCounts,
    rewriter_for,
)
from haulbook.application.services.snapshot_recorder import SnapshotRecorder

__all__ = [
    "ConductorNameReferenceRewriter",
    "ForeignKeyReferenceRewriter",
    "FusionLedger",
    "ReferenceRewriter",
    "RewriteCounts",
    "SnapshotRecorder",
    "rewriter_for",
]
