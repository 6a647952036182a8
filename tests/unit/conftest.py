import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.list_all = AsyncMock(return_value=[])

    uow.groups = MagicMock()
    uow.groups.get_by_id = AsyncMock()
    uow.groups.list_all = AsyncMock(return_value=[])

    uow.memberships = MagicMock()
    uow.memberships.get_by_id = AsyncMock()
    uow.memberships.get_by_user_and_group = AsyncMock(return_value=None)
    uow.memberships.list_pending = AsyncMock(return_value=[])
    uow.memberships.create = AsyncMock(side_effect=lambda m: m)
    uow.memberships.update_status = AsyncMock()
    return uow
