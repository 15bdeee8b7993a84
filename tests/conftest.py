import sys
from pathlib import Path

# Ensure top-level packages import when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

import main


@pytest.fixture
def client():
    """Flask test client over a small, seeded playback."""
    main.configure(main.PlaybackConfig(data_count=6, seed=7))
    main.app.config["TESTING"] = True
    with main.app.test_client() as c:
        yield c
