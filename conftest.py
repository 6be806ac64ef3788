"""
Root conftest - shared pytest configuration.
Ensures the contact_chat package and the tests helpers are importable when
running pytest from the project root without an editable install.
"""
import sys
from pathlib import Path

_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
