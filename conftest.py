"""
Root conftest - shared pytest configuration.
Ensures the estoquehub package is importable when running pytest from the
project root and keeps the module-level app off the on-disk database.
"""
import os
import sys
from pathlib import Path

# Ensure project root is in path for 'from estoquehub...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

# estoquehub.main builds an app at import time; point it at an in-memory database
os.environ.setdefault("DATABASE_URL", "sqlite://")
