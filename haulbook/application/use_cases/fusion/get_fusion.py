"""Get fusion use case."""

from haulbook.application.dto.fusion_dto import FusionDetailOutput
from haulbook.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from haulbook.application.services.fusion_ledger import FusionLedger


class GetFusionUseCase:
    """Use case for reading a single fusion record with its snapshot."""

    def __init__(self, uow: UnitOfWorkPort):
        self.uow = uow

    async def execute(self, fusion_id: int) -> FusionDetailOutput:
        """
        Get a fusion record.

        Raises:
            NotFoundError: If the fusion record does not exist
        """
        async with self.uow:
            record = await FusionLedger(self.uow).get(fusion_id)

        return FusionDetailOutput.from_entity(record)
