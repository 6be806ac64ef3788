# Standard library imports
from typing import Optional

# Local application imports
from ...services.session_manager import SessionManager


class RefreshSessionUseCase:
    """Use case for the per-request heartbeat that slides a session's expiry"""

    def __init__(self, session_manager: SessionManager) -> None:
        self.session_manager = session_manager

    async def execute(self, session_secret: Optional[str]) -> bool:
        return await self.session_manager.update_session(session_secret)
