from .config import Settings, get_settings, reset_settings, load_environment
from .security import (
    hash_password,
    verify_password,
    generate_string_id,
)

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "load_environment",
    "hash_password",
    "verify_password",
    "generate_string_id",
]
