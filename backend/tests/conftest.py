import os
import sys
from pathlib import Path

import pytest


# Keep tests deterministic and offline.
os.environ["RELAY_SKIP_DOTENV"] = "1"
os.environ["RELAY_HOSTING_BACKEND"] = "mock"
os.environ["RELAY_STATIC_DIR"] = "backend/tests/_no_static"
os.environ["GITHUB_TOKEN"] = "test-token"
os.environ["GITHUB_OWNER"] = "octo"
os.environ["GITHUB_BRANCH"] = "main"
os.environ["GITHUB_REPOS"] = "pool-a,pool-b"

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


@pytest.fixture(autouse=True)
def _fresh_hosting():
    from app.api import dependencies
    from app.main import app

    dependencies.get_hosting.cache_clear()
    yield
    app.dependency_overrides.clear()
    dependencies.get_hosting.cache_clear()
