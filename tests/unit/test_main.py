"""
Unit tests for startup/shutdown of the core.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from contact_chat.main import lifespan
from contact_chat.domain.repositories.user_repository import UserRepository


@pytest.mark.asyncio
async def test_lifespan_ensures_indexes_and_closes():
    repository = MagicMock()
    repository.ensure_indexes = AsyncMock()
    container = MagicMock()
    container.get.side_effect = lambda key: {UserRepository: repository}[key]

    with patch("contact_chat.main.get_container", return_value=container), \
            patch("contact_chat.main.load_environment") as load_environment, \
            patch("contact_chat.main.close_connection") as close_connection, \
            patch("contact_chat.main.reset_container") as reset_container:
        async with lifespan() as started:
            assert started is container
            repository.ensure_indexes.assert_awaited_once()
            close_connection.assert_not_called()

    load_environment.assert_called_once()
    close_connection.assert_called_once()
    reset_container.assert_called_once()
