"""Transaction repository port interface."""

from typing import Protocol, Sequence

from haulbook.domain.entities.transaction import Transaction
from haulbook.domain.value_objects.counterparty_ref import CounterpartyRef


class TransactionRepositoryPort(Protocol):
    """Repository interface for Transaction entity."""

    async def list_referencing(self, ref: CounterpartyRef) -> list[Transaction]:
        """
        List transactions whose from or to reference equals ``ref``.

        Returns:
            Transactions ordered by id
        """
        ...

    async def get_many(self, transaction_ids: Sequence[int]) -> list[Transaction]:
        """
        Retrieve the transactions that still exist among ``transaction_ids``.

        Returns:
            Existing transactions ordered by id; missing ids are skipped
        """
        ...

    async def update(self, transaction: Transaction) -> Transaction:
        """
        Persist references and concept of an existing transaction.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        ...
