"""
Pytest fixtures for gateway tests
"""

import os

# Settings are read from the environment; set them before the app is imported
os.environ.setdefault("DOWNSTREAM_BASE_URL", "http://downstream.test")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-at-least-32-bytes")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

import httpx
import jwt
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

pytest_plugins = ('pytest_asyncio',)

DOWNSTREAM_URL = "http://downstream.test"
JWT_SECRET = "test-secret-key-with-at-least-32-bytes"


class FakeDownstream:
    """Records forwarded requests and answers them with a canned reply"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={"response": {}, "errorMessage": None})
        )

    def reply(self, status_code: int = 200, json: Any = None, content: Optional[bytes] = None):
        """Answer every request with this status and body"""
        if content is not None:
            self._responder = lambda request: httpx.Response(status_code, content=content)
        else:
            self._responder = lambda request: httpx.Response(status_code, json=json)

    def envelope(self, response: Any = None, error: Any = None, status_code: int = 200):
        self.reply(status_code, json={"response": response, "errorMessage": error})

    def raise_error(self, exc_type: type, message: str = "boom"):
        def responder(request: httpx.Request) -> httpx.Response:
            raise exc_type(message, request=request)
        self._responder = responder

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=DOWNSTREAM_URL, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        downstream_base_url=DOWNSTREAM_URL,
        jwt_secret_key=JWT_SECRET,
        log_level="WARNING",
    )


@pytest.fixture
def downstream() -> FakeDownstream:
    return FakeDownstream()


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Mint an HS256 access token"""
    def _make_token(
        claims: Optional[Dict[str, Any]] = None,
        expires_in: timedelta = timedelta(minutes=15),
        secret: str = JWT_SECRET
    ) -> str:
        payload = {
            "sub": "11111111-1111-1111-1111-111111111111",
            "email": "ann@example.com",
            "name": "Ann",
            "role": "User",
            "exp": datetime.now(timezone.utc) + expires_in,
        }
        payload.update(claims or {})
        return jwt.encode(payload, secret, algorithm="HS256")
    return _make_token


@pytest.fixture
def auth_headers(make_token) -> Dict[str, str]:
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def client(settings, downstream):
    """Test client whose downstream calls go to the fake downstream"""
    app = create_app(settings, client=downstream.client())
    with TestClient(app) as test_client:
        yield test_client
