"""Utility modules for the contact chat core."""

from .datetime_utils import utc_now, ensure_utc, to_iso

__all__ = [
    "utc_now",
    "ensure_utc",
    "to_iso",
]
