from __future__ import annotations

import os
import tomllib
from typing import Protocol, runtime_checkable

import tomli_w


@runtime_checkable
class TokenStorage(Protocol):
    """Key/value store the client reads its bearer token from."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    def __init__(self, items: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage:
    """
    Persistent storage backed by a flat TOML table.

    The file is read on every access so that a token written by another
    process (e.g. ``restwrap token set``) is picked up by a long-lived client.
    """

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> dict[str, str]:
        try:
            with open(self.path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            return {}
        return {str(k): str(v) for k, v in data.items() if isinstance(v, str)}

    def _save(self, items: dict[str, str]) -> None:
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "wb") as f:
            tomli_w.dump(items, f)
        os.chmod(self.path, 0o600)

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = str(value)
        self._save(items)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key not in items:
            return
        del items[key]
        self._save(items)
