from __future__ import annotations
from dataclasses import dataclass

from .version import __version__


@dataclass(frozen=True)
class ClientConfig:
    host: str
    bearer_token_key: str
    timeout_s: float = 15.0
    user_agent: str = f"restwrap-client/{__version__}"
