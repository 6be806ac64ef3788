# Standard library imports
from typing import Optional

# Local application imports
from ...services.session_manager import SessionManager


class CheckSessionUseCase:
    """Use case answering whether a session secret is currently authenticated"""

    def __init__(self, session_manager: SessionManager) -> None:
        self.session_manager = session_manager

    async def execute(self, session_secret: Optional[str]) -> bool:
        return await self.session_manager.check_session(session_secret)
