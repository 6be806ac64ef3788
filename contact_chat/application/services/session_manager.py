# Standard library imports
import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

# Local application imports
from ...core.config import get_settings
from ...core.security import generate_string_id
from ...domain.models.user import User
from ...utils.datetime_utils import ensure_utc, to_iso, utc_now
from .user_store import UserStore

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Session secret lifecycle over a user's (session_secret, last_accessed) pair.

    States:
    - logged out: session_secret is None
    - logged in: session_secret set and now <= last_accessed + valid_session_time
    - expired: session_secret set but the window has passed; detected lazily

    Every operation fails closed: unknown secrets, expired windows and store
    faults all come back as False / None, never as an exception.
    """

    def __init__(
        self,
        user_store: UserStore,
        valid_session_time: Optional[timedelta] = None,
        string_id_length: Optional[int] = None,
        clock: Callable[[], datetime] = utc_now,
        id_generator: Callable[[int], str] = generate_string_id,
    ) -> None:
        settings = get_settings()
        self.user_store = user_store
        self.valid_session_time = (
            valid_session_time if valid_session_time is not None else settings.valid_session_time
        )
        self.string_id_length = (
            string_id_length if string_id_length is not None else settings.string_id_length
        )
        self.clock = clock
        self.id_generator = id_generator

    def expiration_of(self, user: User) -> Optional[datetime]:
        """Instant after which the user's current session is no longer valid"""
        last_accessed = ensure_utc(user.last_accessed)
        if last_accessed is None:
            return None
        return last_accessed + self.valid_session_time

    def is_live(self, user: User) -> bool:
        if not user.has_session:
            return False
        expiration = self.expiration_of(user)
        if expiration is None:
            return False
        return ensure_utc(self.clock()) <= expiration

    async def create_session(self, user: User) -> Optional[str]:
        """
        Mint a new session secret for the user and persist it

        Any previous secret is overwritten and stops resolving.

        Returns:
            The new session secret, or None if it could not be stored
        """
        try:
            session_secret = self.id_generator(self.string_id_length)
            now = self.clock()
            started = await self.user_store.start_session(user, session_secret, now)
        except Exception as e:
            logger.error(f"Failed to create session for user {user.id}: {e}", exc_info=True)
            return None

        if not started:
            logger.warning(f"Failed to create session for user {user.id}: user not found")
            return None

        user.session_secret = session_secret
        user.last_accessed = now
        logger.info(f"Session created for user {user.id}")
        return session_secret

    async def resolve_user(self, claimed_session: Optional[str]) -> Optional[User]:
        """
        Find the owner of a live session

        Returns:
            The user, or None if the secret is empty, unknown or expired

        Raises:
            DatabaseError: If the lookup itself fails
        """
        if not claimed_session:
            return None

        user = await self.user_store.find_by_session_secret(claimed_session)
        if user is None:
            logger.debug("Session lookup found no user")
            return None
        if not self.is_live(user):
            logger.debug(f"Session for user {user.id} has expired")
            return None
        return user

    async def check_session(self, claimed_session: Optional[str]) -> bool:
        """
        Verify a session by its existence and last accessed date (read only)

        Returns:
            True if now <= last_accessed + valid_session_time
        """
        try:
            return await self.resolve_user(claimed_session) is not None
        except Exception as e:
            logger.error(f"Session check failed: {e}", exc_info=True)
            return False

    async def update_session(self, claimed_session: Optional[str]) -> bool:
        """
        Slide the session window forward by touching last_accessed

        An expired session is not refreshed; the caller has to log in again.
        Liveness is checked by the same write that refreshes, so a session
        cleared concurrently stays cleared.

        Returns:
            True if the session was live and has been refreshed
        """
        if not claimed_session:
            return False

        now = self.clock()
        try:
            refreshed = await self.user_store.touch_session(
                claimed_session, now, now - self.valid_session_time
            )
        except Exception as e:
            logger.error(f"Session refresh failed: {e}", exc_info=True)
            return False

        if refreshed:
            logger.debug(f"Session refreshed until {to_iso(now + self.valid_session_time)}")
        else:
            logger.debug("Session refresh found no live session")
        return refreshed

    async def destroy_session(self, claimed_session: Optional[str]) -> bool:
        """
        Log out by clearing the session secret

        Expired sessions can still be destroyed.

        Returns:
            True if a session was found and cleared
        """
        if not claimed_session:
            return False

        try:
            cleared = await self.user_store.clear_session(claimed_session, self.clock())
        except Exception as e:
            logger.error(f"Session destroy failed: {e}", exc_info=True)
            return False

        if cleared:
            logger.info("Session destroyed")
        return cleared
