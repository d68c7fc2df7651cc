"""
Application configuration module.

Centralizes all configuration values for the MCP servers and clients.
Settings are read once at startup into an immutable ``Settings`` object
which is then passed explicitly to everything that needs it.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

# Project paths
PROJECT_ROOT = Path(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Environment variable keys
ENV_MINIMAX_API_KEY = "MINIMAX_API_KEY"
ENV_MINIMAX_API_HOST = "MINIMAX_API_HOST"
ENV_MINIMAX_MCP_MODE = "MINIMAX_MCP_MODE"
ENV_MINIMAX_MCP_ADDR = "MINIMAX_MCP_ADDR"
ENV_MINIMAX_MCP_BASE_PATH = "MINIMAX_MCP_BASE_PATH"
ENV_RESOURCE_MODE = "RESOURCE_MODE"
ENV_GAODE_API_KEY = "GAODE_API_KEY"

DEFAULT_ADDR = "127.0.0.1:8080"


# Server transport modes
class ServerMode:
    STDIO = "stdio"
    SSE = "sse"
    STREAMABLE = "streamable"

    ALL = (STDIO, SSE, STREAMABLE)


# Resource modes: return vendor URLs, or download/embed the bytes
class ResourceMode:
    URL = "url"
    DATA = "data"

    ALL = (URL, DATA)


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    api_key: str
    api_host: str
    mode: str = ServerMode.STDIO
    host: str = "127.0.0.1"
    port: int = 8080
    base_path: Optional[str] = None
    resource_mode: str = ResourceMode.URL

    @property
    def addr(self) -> str:
        return f"{self.host}:{self.port}"


def parse_addr(addr: str) -> tuple[str, int]:
    """Split a ``host:port`` bind address."""
    host, sep, port = addr.rpartition(":")
    if not sep or not host or not port.isdigit():
        raise ConfigError(f"Invalid address '{addr}', expected host:port")
    return host, int(port)


def load_settings(
    env: Optional[Mapping[str, str]] = None, dotenv_path: Optional[str] = None
) -> Settings:
    """
    Build the MiniMax server settings.

    Loads ``.env`` from the project root (or *dotenv_path*) into the process
    environment unless an explicit *env* mapping is given.
    """
    if env is None:
        load_dotenv(dotenv_path or os.path.join(PROJECT_ROOT, ".env"))
        env = os.environ

    api_key = env.get(ENV_MINIMAX_API_KEY, "").strip()
    if not api_key:
        raise ConfigError(f"{ENV_MINIMAX_API_KEY} is not set")

    api_host = env.get(ENV_MINIMAX_API_HOST, "").strip().rstrip("/")
    if not api_host:
        raise ConfigError(f"{ENV_MINIMAX_API_HOST} is not set")

    mode = env.get(ENV_MINIMAX_MCP_MODE, "").strip().lower() or ServerMode.STDIO
    if mode not in ServerMode.ALL:
        raise ConfigError(
            f"Invalid {ENV_MINIMAX_MCP_MODE} '{mode}', expected one of {list(ServerMode.ALL)}"
        )

    host, port = parse_addr(env.get(ENV_MINIMAX_MCP_ADDR, "").strip() or DEFAULT_ADDR)

    resource_mode = env.get(ENV_RESOURCE_MODE, "").strip().lower() or ResourceMode.URL
    if resource_mode not in ResourceMode.ALL:
        raise ConfigError(
            f"Invalid {ENV_RESOURCE_MODE} '{resource_mode}', expected one of {list(ResourceMode.ALL)}"
        )

    base_path = env.get(ENV_MINIMAX_MCP_BASE_PATH, "").strip() or None

    return Settings(
        api_key=api_key,
        api_host=api_host,
        mode=mode,
        host=host,
        port=port,
        base_path=base_path,
        resource_mode=resource_mode,
    )


def load_gaode_key(
    env: Optional[Mapping[str, str]] = None, dotenv_path: Optional[str] = None
) -> str:
    """Return the AMap key used by the Gaode client."""
    if env is None:
        load_dotenv(dotenv_path or os.path.join(PROJECT_ROOT, ".env"))
        env = os.environ

    key = env.get(ENV_GAODE_API_KEY, "").strip()
    if not key:
        raise ConfigError(f"{ENV_GAODE_API_KEY} is not set")
    return key
