from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.app import app
from app.services.douban import DoubanClient, DoubanService, get_douban_service

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures" / "douban"


class FakeDouban:
    """Stand-in for movie.douban.com: records every request and answers via ``responder``."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responder = lambda request: httpx.Response(200, json={"subjects": []})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def make_service(self) -> DoubanService:
        return DoubanService(DoubanClient(transport=httpx.MockTransport(self)))


@pytest.fixture
def search_payload() -> dict:
    return json.loads((FIXTURES_DIR / "search_subjects_sample.json").read_text(encoding="utf-8"))


@pytest.fixture
def top250_html() -> str:
    return (FIXTURES_DIR / "top250_sample.html").read_text(encoding="utf-8")


@pytest.fixture
def fake_douban() -> FakeDouban:
    return FakeDouban()


@pytest.fixture
def client(fake_douban):
    """Create a test client whose Douban service talks to ``fake_douban``."""
    service = fake_douban.make_service()
    app.dependency_overrides[get_douban_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
