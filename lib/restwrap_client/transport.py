from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from .config_types import ClientConfig
from .errors import NetworkError

log = logging.getLogger(__name__)


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None):
        self._cfg = cfg
        headers = {
            "User-Agent": cfg.user_agent,
            "Accept": "application/json",
        }
        self._client = httpx.AsyncClient(
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
            self,
            method: str,
            url: str,
            *,
            params: Mapping[str, Any] | None = None,
            json_body: Any | None = None,
            headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {}
        if params is not None:
            kwargs["params"] = params
        if json_body is not None:
            kwargs["json"] = json_body
        if headers:
            kwargs["headers"] = headers
        try:
            r = await self._client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            log.debug("%s %s failed: %s", method, url, e)
            raise NetworkError(str(e)) from e

        log.debug("%s %s -> %s", method, url, r.status_code)
        return r
