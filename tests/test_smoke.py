"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""
from datetime import timedelta


def test_import_package():
    """Verify package can be imported and settings come from the environment."""
    from contact_chat.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "mongo_uri")
    assert settings.bcrypt_salt_work_factor == 4
    assert settings.valid_session_time == timedelta(minutes=30)


def test_pytest_runs():
    """Basic sanity check that pytest executes tests."""
    assert True
