"""Trip repository port interface."""

from typing import Protocol, Sequence

from haulbook.domain.entities.trip import Trip
from haulbook.domain.value_objects.fusion_snapshot import TripLinkField


class TripRepositoryPort(Protocol):
    """Repository interface for Trip entity."""

    async def list_by_link(self, field: TripLinkField, value: int | str) -> list[Trip]:
        """
        List trips whose attribution column equals ``value``.

        Conductor names are compared exactly (case-sensitive).

        Returns:
            Trips ordered by id
        """
        ...

    async def get_many(self, trip_ids: Sequence[int]) -> list[Trip]:
        """
        Retrieve the trips that still exist among ``trip_ids``.

        Returns:
            Existing trips ordered by id; missing ids are skipped
        """
        ...

    async def update(self, trip: Trip) -> Trip:
        """
        Persist attribution columns of an existing trip.

        Raises:
            NotFoundError: If trip doesn't exist
        """
        ...
