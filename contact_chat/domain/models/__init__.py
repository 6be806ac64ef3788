from .user import User, normalize_email
from .contact import ContactSummary

__all__ = ["User", "ContactSummary", "normalize_email"]
