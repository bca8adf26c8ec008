from __future__ import annotations

import os
import sys
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from . import console

APP_NAME = "restwrap"
CONFIG_FILENAME = "config.toml"
STORAGE_FILENAME = "storage.toml"
DEFAULT_HOST = "http://127.0.0.1:8000"
DEFAULT_TOKEN_KEY = "auth_token"
ENV_HOST = "RESTWRAP_HOST"

_WARNED_HOST_SCHEME = False


@dataclass
class AppConfig:
    host: str
    bearer_token_key: str = DEFAULT_TOKEN_KEY


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def storage_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{STORAGE_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(host=DEFAULT_HOST, bearer_token_key=DEFAULT_TOKEN_KEY)


def normalize_host(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_HOST_SCHEME
    if _WARNED_HOST_SCHEME:
        return
    if not _is_interactive():
        return
    console.warn(f"host missing scheme, assuming {normalized}")
    _WARNED_HOST_SCHEME = True


def _is_interactive() -> bool:
    return bool(sys.stderr.isatty() or sys.stdout.isatty())


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "host": cfg.host,
        "bearer_token_key": cfg.bearer_token_key,
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    host = normalize_host(str(data.get("host") or ""), warn=True)
    token_key = str(data.get("bearer_token_key") or "").strip()
    return AppConfig(
        host=host or DEFAULT_HOST,
        bearer_token_key=token_key or DEFAULT_TOKEN_KEY,
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        tomli_w.dump(to_toml(cfg), f)
    os.chmod(path, 0o600)
    return path


def resolve_host(cfg: AppConfig, override: str | None = None) -> str:
    """--host wins over RESTWRAP_HOST, which wins over the config file."""
    raw = override or os.getenv(ENV_HOST) or cfg.host
    return normalize_host(raw, warn=True)
