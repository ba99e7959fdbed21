# Test configuration
import json
import sys
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))

from src.config import RemoteEndpoint  # noqa: E402
from src.gateway.service import Gateway  # noqa: E402
from src.registry.service import build_registry  # noqa: E402


class FakeFizzy:
    """Stands in for the Fizzy API: records requests, replies with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.headers: dict[str, str] = {}
        self.content: bytes = b"{}"

    def reply(self, status_code: int = 200, *, json_body=None, text: str | None = None,
              headers: dict[str, str] | None = None) -> None:
        self.status_code = status_code
        self.headers = headers or {}
        if json_body is not None:
            self.content = json.dumps(json_body).encode("utf-8")
        else:
            self.content = (text or "").encode("utf-8")

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, headers=self.headers, content=self.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def endpoint() -> RemoteEndpoint:
    return RemoteEndpoint(base_url="http://fizzy.test/", token="secret-token", account_id="1")


@pytest.fixture
def fizzy() -> FakeFizzy:
    return FakeFizzy()


@pytest.fixture
def make_gateway(registry, fizzy) -> Callable[..., Gateway]:
    # MockTransport holds no sockets, so clients need no closing
    def factory(endpoint: RemoteEndpoint) -> Gateway:
        client = httpx.AsyncClient(transport=httpx.MockTransport(fizzy.handler))
        return Gateway(endpoint=endpoint, client=client, registry=registry)

    return factory


@pytest.fixture
def gateway(make_gateway, endpoint) -> Gateway:
    return make_gateway(endpoint)
