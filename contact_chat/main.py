# Standard library imports
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

# Local application imports
from .core.config import load_environment, reset_settings
from .di.container import DIContainer, get_container, reset_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_connection

logger = logging.getLogger(__name__)


async def startup() -> DIContainer:
    """
    Prepare the core for a transport collaborator.

    Loads environment variables from .env, builds the DI container and
    creates the user collection indexes (unique email, unique live session
    secret).

    Returns:
        DIContainer with every use case registered
    """
    load_environment()
    reset_settings()
    container = get_container()

    user_repository = container.get(UserRepository)
    if hasattr(user_repository, "ensure_indexes"):
        await user_repository.ensure_indexes()

    logger.info("Contact chat core started")
    return container


async def shutdown() -> None:
    """Close the database client and drop the container"""
    close_connection()
    reset_container()
    logger.info("Contact chat core shutdown complete")


@asynccontextmanager
async def lifespan() -> AsyncIterator[DIContainer]:
    """
    Lifespan context manager for startup/shutdown.

    Usage:
        async with lifespan() as container:
            login = container.get(LoginUserUseCase)
    """
    container = await startup()
    try:
        yield container
    finally:
        await shutdown()
