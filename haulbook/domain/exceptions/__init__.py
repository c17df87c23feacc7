"""Domain exceptions package."""

from haulbook.domain.exceptions.base import DomainException
from haulbook.domain.exceptions.fusion_exceptions import (
    FusionAlreadyRevertedError,
    FusionDomainException,
    InvalidPartnerKindError,
    InvalidSnapshotError,
)

__all__ = [
    # Base
    "DomainException",
    # Fusion exceptions
    "FusionDomainException",
    "FusionAlreadyRevertedError",
    "InvalidPartnerKindError",
    "InvalidSnapshotError",
]
