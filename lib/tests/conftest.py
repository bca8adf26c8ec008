from __future__ import annotations

import json

import httpx
import pytest

from restwrap_client import APIClient, ClientConfig, MemoryStorage

HOST = "http://www.example.com"
TOKEN_KEY = "auth_token"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class FakeServer:
    """Records every request and answers with a canned status/body."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = None
        self.raise_exc: Exception | None = None

    def respond(self, body=None, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_exc is not None:
            raise self.raise_exc
        if self.body is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was made"
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
async def api(server, storage):
    client = APIClient(
        ClientConfig(host=HOST, bearer_token_key=TOKEN_KEY),
        storage=storage,
        transport=httpx.MockTransport(server.handler),
    )
    yield client
    await client.aclose()
