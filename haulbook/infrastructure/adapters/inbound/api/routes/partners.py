"""
Partner consolidation routes.

- POST /api/v1/partners/{kind}/merge - Merge one partner into another
"""

import logging

from fastapi import APIRouter, Depends, Path

from haulbook.application.dto.fusion_dto import MergeEntitiesInput, MergeResultOutput
from haulbook.application.use_cases.fusion import MergeEntitiesUseCase
from haulbook.domain.value_objects.partner_kind import PartnerKind
from haulbook.infrastructure.adapters.inbound.api.schemas import MergeRequest
from haulbook.infrastructure.config.dependencies import get_merge_entities_use_case

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/partners", tags=["Partners"])


@router.post(
    "/{kind}/merge",
    response_model=MergeResultOutput,
    summary="Merge two partners of the same kind",
    responses={
        400: {"description": "Origin and destination are the same partner"},
        404: {"description": "Origin or destination not found"},
        409: {"description": "Concurrent modification detected"},
    },
)
async def merge_partners(
    body: MergeRequest,
    kind: PartnerKind = Path(..., description="site, buyer or hauler"),
    use_case: MergeEntitiesUseCase = Depends(get_merge_entities_use_case),
) -> MergeResultOutput:
    """
    Merge the origin partner into the destination.

    Every transaction and trip that referenced the origin is moved to the
    destination, the origin is deleted and a fusion record is written so
    the merge can be reverted.
    """
    return await use_case.execute(
        MergeEntitiesInput(
            kind=kind,
            origin_id=body.origin_id,
            destination_id=body.destination_id,
            performed_by=body.performed_by,
        )
    )
