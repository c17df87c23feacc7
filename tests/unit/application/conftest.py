"""Shared fixtures for application layer tests."""

from unittest.mock import AsyncMock, Mock

import pytest


@pytest.fixture
def mock_uow():
    """Create a mock Unit of Work whose updates echo their argument."""
    uow = Mock()
    uow.partners = Mock()
    uow.transactions = Mock()
    uow.trips = Mock()
    uow.fusion_records = Mock()
    uow.transactions.update = AsyncMock(side_effect=lambda transaction: transaction)
    uow.trips.update = AsyncMock(side_effect=lambda trip: trip)
    uow.commit = AsyncMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)  # Don't suppress exceptions
    return uow
