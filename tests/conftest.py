"""Shared fixtures: put the project root on sys.path and fake the upstream APIs."""

import os
import sys

import httpx
import pytest
from fastapi.testclient import TestClient

CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from main import app, get_http_client  # noqa: E402


class Upstream:
    """Records outbound requests and answers them with a configurable handler."""

    def __init__(self):
        self.requests = []
        self.handler = lambda request: httpx.Response(404)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def upstream():
    fake = Upstream()

    async def fake_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(fake)) as http_client:
            yield http_client

    app.dependency_overrides[get_http_client] = fake_client
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def client(upstream):
    return TestClient(app)
