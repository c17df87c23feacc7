"""Partner and fusion domain exceptions."""

from haulbook.domain.exceptions.base import DomainException


class FusionDomainException(DomainException):
    """Base exception for partner consolidation errors."""


class InvalidPartnerKindError(FusionDomainException):
    """Raised when a partner kind string is not one of site, buyer or hauler."""

    def __init__(self, value: str):
        super().__init__(
            message=f"Invalid partner kind: {value!r}",
            code="INVALID_PARTNER_KIND",
        )


class InvalidSnapshotError(FusionDomainException):
    """Raised when a stored fusion snapshot cannot be decoded."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid fusion snapshot: {reason}",
            code="INVALID_SNAPSHOT",
        )


class FusionAlreadyRevertedError(FusionDomainException):
    """Raised when reverting a fusion record that is already reverted."""

    def __init__(self, fusion_id: int | None):
        super().__init__(
            message=f"Fusion {fusion_id} has already been reverted",
            code="FUSION_ALREADY_REVERTED",
        )
