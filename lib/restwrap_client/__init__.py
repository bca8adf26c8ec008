from .client import APIClient
from .config_types import ClientConfig
from .errors import ApiError, AuthError, ConfigError, NetworkError, RestwrapClientError
from .storage import FileStorage, MemoryStorage, TokenStorage
from .version import __version__

__all__ = [
    "APIClient",
    "ClientConfig",
    "ApiError",
    "AuthError",
    "ConfigError",
    "NetworkError",
    "RestwrapClientError",
    "FileStorage",
    "MemoryStorage",
    "TokenStorage",
    "__version__",
]
