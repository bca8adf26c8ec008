from __future__ import annotations

import json
from typing import Any, Mapping
from urllib.parse import urlsplit

import httpx

from .config_types import ClientConfig
from .errors import ApiError, AuthError, ConfigError
from .storage import TokenStorage
from .transport import Transport


class _Requester:
    """The four verbs, with or without the stored bearer token."""

    def __init__(self, api: APIClient, *, authenticated: bool):
        self._api = api
        self._authenticated = authenticated

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self._api._request("GET", path, params=params, authenticated=self._authenticated)

    async def delete(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self._api._request("DELETE", path, params=params, authenticated=self._authenticated)

    async def post(self, path: str, params: Any | None = None) -> Any:
        return await self._api._request("POST", path, json_body=params, authenticated=self._authenticated)

    async def patch(self, path: str, params: Any | None = None) -> Any:
        return await self._api._request("PATCH", path, json_body=params, authenticated=self._authenticated)


class APIClient:
    def __init__(
            self,
            cfg: ClientConfig,
            *,
            storage: TokenStorage,
            transport: httpx.AsyncBaseTransport | None = None,
    ):
        host = (cfg.host or "").strip()
        if not host:
            raise ConfigError("host is required")
        if urlsplit(host).scheme not in ("http", "https"):
            raise ConfigError(f"host must start with http:// or https://, got {host!r}")
        if not (cfg.bearer_token_key or "").strip():
            raise ConfigError("bearer_token_key is required")

        self._cfg = cfg
        self._host = host.rstrip("/")
        self._storage = storage
        self._t = Transport(cfg, transport=transport)
        self.unauthenticated = _Requester(self, authenticated=False)
        self.authenticated = _Requester(self, authenticated=True)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> APIClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def absolute_path(self, path: str) -> str:
        parts = urlsplit(path)
        if parts.netloc or parts.scheme in ("http", "https"):
            raise ValueError(f"expected a path relative to the host, got {path!r}")
        return f"{self._host}/{path.lstrip('/')}"

    def bearer_token(self) -> str | None:
        # Read on every call; the token may be written after construction.
        return self._storage.get_item(self._cfg.bearer_token_key) or None

    async def _request(
            self,
            method: str,
            path: str,
            *,
            params: Mapping[str, Any] | None = None,
            json_body: Any | None = None,
            authenticated: bool,
    ) -> Any:
        url = self.absolute_path(path)
        headers: dict[str, str] = {}
        if authenticated:
            token = self.bearer_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"

        r = await self._t.request(method, url, params=params, json_body=json_body, headers=headers)
        if not r.is_success:
            raise _error_for(method, path, r)
        if not r.content:
            return None
        try:
            return r.json()
        except ValueError:
            return r.text


def _error_for(method: str, path: str, r: httpx.Response) -> ApiError:
    msg = f"{method} {path} failed with {r.status_code}"
    details = None
    data: Any = None
    try:
        data = r.json()
    except ValueError:
        pass

    if isinstance(data, dict) and "detail" in data:
        details = json.dumps(data, ensure_ascii=False)
        msg = str(data.get("detail") or msg)
    elif r.text:
        details = r.text[:1000]

    if r.status_code in (401, 403):
        return AuthError(r.status_code, msg, details, response=r)
    return ApiError(r.status_code, msg, details, response=r)
