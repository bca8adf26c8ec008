from __future__ import annotations

import asyncio
import json
from typing import Any

import typer

from restwrap_client import ApiError, APIClient, ConfigError, NetworkError
from restwrap_client.errors import parse_api_error_detail

from .. import console
from ..config import load_config
from ..http import make_client

METHODS = ("get", "post", "patch", "delete")


def _parse_params(pairs: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"expected key=value, got {pair!r}", param_hint="--param")
        params[key.strip()] = value
    return params


def _parse_data(raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError as e:
        raise typer.BadParameter(f"invalid JSON: {e}", param_hint="--data") from e


async def _send(client: APIClient, method: str, path: str, params: Any, *, auth: bool) -> Any:
    async with client:
        requester = client.authenticated if auth else client.unauthenticated
        return await getattr(requester, method)(path, params)


def request(
        method: str = typer.Argument(..., help="One of get, post, patch, delete."),
        path: str = typer.Argument(..., help="Path relative to the configured host, e.g. users/1."),
        param: list[str] = typer.Option(
            [], "--param", "-p", help="key=value; query string for get/delete, JSON body for post/patch."
        ),
        data: str | None = typer.Option(None, "--data", "-d", help="Raw JSON body (post/patch only)."),
        auth: bool = typer.Option(True, "--auth/--no-auth", help="Attach the stored bearer token."),
        host: str | None = typer.Option(None, "--host", help="Override host."),
):
    """Send one request and print the JSON response."""
    verb = method.strip().lower()
    if verb not in METHODS:
        raise typer.BadParameter(f"expected one of {', '.join(METHODS)}", param_hint="METHOD")

    params: Any = _parse_params(param) or None
    if data is not None:
        if verb not in ("post", "patch"):
            raise typer.BadParameter("--data is only valid for post/patch", param_hint="--data")
        if params:
            raise typer.BadParameter("use either --param or --data, not both", param_hint="--data")
        params = _parse_data(data)

    cfg = load_config()
    try:
        client = make_client(cfg, host_override=host)
    except ConfigError as e:
        console.err(str(e))
        raise typer.Exit(code=2)

    try:
        result = asyncio.run(_send(client, verb, path, params, auth=auth))
    except ApiError as e:
        console.err(f"{e.status_code}: {e}")
        detail = parse_api_error_detail(e.details)
        if detail is not None:
            console.print_json(detail)
        elif e.details:
            console.console.print(e.details, markup=False)
        raise typer.Exit(code=2)
    except NetworkError as e:
        console.err(f"Request failed: {e}")
        raise typer.Exit(code=1)
    except ValueError as e:
        console.err(str(e))
        raise typer.Exit(code=2)

    if result is None:
        console.ok(f"{verb.upper()} {path}")
    elif isinstance(result, str):
        console.console.print(result, markup=False)
    else:
        console.print_json(result)
