from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.services.user_store import UserStore
from ...application.services.session_manager import SessionManager
from ...application.services.contact_manager import ContactManager

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ServiceProvider:
    """Application service provider - user store, session manager and contact manager"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register application services as singletons.
        Services are stateless apart from their collaborators, so one instance is shared.
        """
        user_store = UserStore(user_repository=container.get(UserRepository))
        session_manager = SessionManager(user_store=user_store)

        container.register_singleton(UserStore, user_store)
        container.register_singleton(SessionManager, session_manager)
        container.register_singleton(
            ContactManager,
            ContactManager(session_manager=session_manager, user_store=user_store)
        )
