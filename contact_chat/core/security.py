# Standard library imports
import secrets
import string
from typing import Optional

# External package imports
import bcrypt

# Local application imports
from .config import get_settings
from ..domain.exceptions import HashingFailure


STRING_ID_ALPHABET = string.ascii_letters + string.digits
# bcrypt only reads the first 72 bytes; bcrypt>=5 refuses longer input
BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(plain_password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt work factor (defaults to the configured salt work factor)

    Returns:
        Hashed password string

    Raises:
        HashingFailure: If salt generation or hashing fails
    """
    if rounds is None:
        rounds = get_settings().bcrypt_salt_work_factor

    try:
        salt = bcrypt.gensalt(rounds=rounds)
        hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    except (ValueError, TypeError, AttributeError) as exception:
        raise HashingFailure(f"Could not hash password: {str(exception)}") from exception
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except Exception:
        return False


def generate_string_id(length: int) -> str:
    """
    Generate an unguessable alphanumeric identifier (used as a session secret)

    Args:
        length: Number of characters in the identifier

    Returns:
        Random string drawn from ASCII letters and digits

    Raises:
        ValueError: If length is not positive
    """
    if length < 1:
        raise ValueError("Identifier length must be at least 1")
    return "".join(secrets.choice(STRING_ID_ALPHABET) for _ in range(length))
