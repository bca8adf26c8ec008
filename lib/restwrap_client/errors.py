from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class RestwrapClientError(Exception):
    """Base client error."""


class ConfigError(RestwrapClientError):
    """Client was constructed with an unusable configuration."""


class NetworkError(RestwrapClientError):
    """Transport/network layer error."""


class ApiError(RestwrapClientError):
    def __init__(
            self,
            status_code: int,
            message: str,
            details: str | None = None,
            response: httpx.Response | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.details = details
        self.response = response


class AuthError(ApiError):
    """Auth-related API error."""


def parse_api_error_detail(details: str | None) -> dict | None:
    if not details:
        return None
    try:
        data = json.loads(details)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None
