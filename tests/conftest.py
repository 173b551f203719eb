"""
Shared fixtures for gateway tests.

Nothing here talks to Notion: HTTP is mocked with `responses`, and the
dispatcher tests use a recording fake in place of NotionAPI.
"""

import os
import sys
from typing import Any, Dict, List, Tuple

import pytest
import responses

# Ensure project root is on sys.path so 'core' / 'tools' imports resolve in tests
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from core.notion_api import NotionAPI  # noqa: E402

API = "https://api.notion.com/v1"
TOKEN = "secret_test_token"


class FakeNotionAPI:
    """Records every client call instead of making it."""

    def __init__(self, token: str = TOKEN) -> None:
        self.token = token
        self.calls: List[Tuple[str, tuple, Dict[str, Any]]] = []

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)

        def _call(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return {"object": "fake", "method": name}

        return _call


@pytest.fixture
def fake_client():
    return FakeNotionAPI()


@pytest.fixture
def notion():
    return NotionAPI(TOKEN, base=API, version="2025-09-03")


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps
