from __future__ import annotations

from restwrap_client import APIClient, FileStorage
from restwrap_client.config_types import ClientConfig

from .config import AppConfig, resolve_host, storage_path


def make_storage() -> FileStorage:
    return FileStorage(storage_path())


def make_client(cfg: AppConfig, *, host_override: str | None) -> APIClient:
    return APIClient(
        ClientConfig(
            host=resolve_host(cfg, host_override),
            bearer_token_key=cfg.bearer_token_key,
        ),
        storage=make_storage(),
    )
