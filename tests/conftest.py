import json
import sys
from pathlib import Path

import pytest
import requests

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


@pytest.fixture
def make_response():
    """Build real requests.Response objects without touching the network."""
    def _make(status=200, text="", url="", json_body=None):
        r = requests.Response()
        r.status_code = status
        if json_body is not None:
            text = json.dumps(json_body)
        r._content = text.encode("utf-8")
        r.encoding = "utf-8"
        r.url = url
        return r
    return _make


@pytest.fixture
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr("embed_search.orchestrator.time.sleep", calls.append)
    return calls


@pytest.fixture
def client():
    from app import app as flask_app
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as c:
        yield c
