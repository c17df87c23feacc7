"""
Fusion ledger routes.

- GET  /api/v1/fusions                      - Fusion history, most recent first
- GET  /api/v1/fusions/{fusion_id}          - One fusion with its snapshot
- POST /api/v1/fusions/{fusion_id}/revert   - Undo a fusion
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from haulbook.application.dto.fusion_dto import (
    FusionDetailOutput,
    FusionSummaryOutput,
    RevertResultOutput,
)
from haulbook.application.use_cases.fusion import (
    GetFusionUseCase,
    ListFusionHistoryUseCase,
    RevertFusionUseCase,
)
from haulbook.domain.value_objects.partner_kind import PartnerKind
from haulbook.infrastructure.adapters.inbound.api.schemas import (
    PaginatedResponse,
    PaginationMeta,
    PaginationParams,
)
from haulbook.infrastructure.config.dependencies import (
    get_get_fusion_use_case,
    get_list_fusion_history_use_case,
    get_revert_fusion_use_case,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fusions", tags=["Fusions"])


@router.get(
    "",
    response_model=PaginatedResponse[FusionSummaryOutput],
    summary="List fusion history",
)
async def list_fusions(
    pagination: PaginationParams = Depends(),
    kind: Optional[PartnerKind] = Query(None, description="Only this partner kind"),
    performed_by: Optional[str] = Query(None, max_length=100, description="Only this operator"),
    use_case: ListFusionHistoryUseCase = Depends(get_list_fusion_history_use_case),
) -> PaginatedResponse[FusionSummaryOutput]:
    """List fusions, most recent first, with revert status and affected counts."""
    history = await use_case.execute(
        kind=kind,
        performed_by=performed_by,
        page=pagination.page,
        page_size=pagination.page_size,
    )
    return PaginatedResponse[FusionSummaryOutput](
        data=history.items,
        meta=PaginationMeta(
            total=history.total,
            page=history.page,
            page_size=history.page_size,
            total_pages=PaginationParams.calculate_total_pages(history.total, history.page_size),
        ),
    )


@router.get(
    "/{fusion_id}",
    response_model=FusionDetailOutput,
    summary="Get a fusion",
    responses={404: {"description": "Fusion not found"}},
)
async def get_fusion(
    fusion_id: int = Path(..., gt=0),
    use_case: GetFusionUseCase = Depends(get_get_fusion_use_case),
) -> FusionDetailOutput:
    """Get a fusion record including the snapshot needed to revert it."""
    return await use_case.execute(fusion_id)


@router.post(
    "/{fusion_id}/revert",
    response_model=RevertResultOutput,
    summary="Revert a fusion",
    responses={
        404: {"description": "Fusion not found"},
        409: {"description": "Fusion already reverted or origin id in use"},
    },
)
async def revert_fusion(
    fusion_id: int = Path(..., gt=0),
    use_case: RevertFusionUseCase = Depends(get_revert_fusion_use_case),
) -> RevertResultOutput:
    """
    Undo a fusion.

    The origin partner is recreated under its original id and every
    transaction and trip the merge moved is pointed back at it.
    """
    return await use_case.execute(fusion_id)
