from .user_store import UserStore
from .session_manager import SessionManager
from .contact_manager import ContactManager

__all__ = ["UserStore", "SessionManager", "ContactManager"]
