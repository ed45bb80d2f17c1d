import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# The app refuses to import without trusted origins configured.
os.environ.setdefault("ALLOWED_ORIGINS", "http://localhost:3000")
os.environ.setdefault("ALLOW_CREDENTIALS", "false")

from tenpin.services import GameRegistry  # noqa: E402


@pytest.fixture()
def registry():
    """A fresh, unbounded registry for each test."""
    return GameRegistry()
