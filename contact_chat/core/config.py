# Standard library imports
import os
from datetime import timedelta
from pathlib import Path
from typing import Final, Optional

# External package imports
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the contact chat core.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "contact_chat")
        self.mongo_timeout_ms: Final[int] = int(os.getenv("MONGO_TIMEOUT_MS", "10000"))

        # Password hashing
        self.bcrypt_salt_work_factor: Final[int] = int(
            os.getenv("BCRYPT_SALT_WORK_FACTOR", "12")
        )

        # Session Configuration
        self.string_id_length: Final[int] = int(os.getenv("STRING_ID_LENGTH", "64"))
        self.valid_session_time: Final[timedelta] = timedelta(
            seconds=int(os.getenv("VALID_SESSION_TIME_SECONDS", "3600"))
        )


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def load_environment(env_path: Optional[Path] = None) -> None:
    """
    Load environment variables from a .env file.

    Variables already present in the process environment are not overridden.

    Args:
        env_path: Path to the .env file (defaults to the project root)
    """
    if env_path is None:
        env_path = Path(__file__).resolve().parent.parent.parent / ".env"
    load_dotenv(env_path)


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
