"""Tests for configuration loading."""

import dataclasses

import pytest

from mcp_servers.config import ConfigError, ResourceMode, ServerMode, load_gaode_key, load_settings

BASE_ENV = {"MINIMAX_API_KEY": "key", "MINIMAX_API_HOST": "https://api.minimax.chat/"}


def test_defaults():
    settings = load_settings(env=BASE_ENV)

    assert settings.api_key == "key"
    assert settings.api_host == "https://api.minimax.chat"
    assert settings.mode == ServerMode.STDIO
    assert settings.addr == "127.0.0.1:8080"
    assert settings.resource_mode == ResourceMode.URL
    assert settings.base_path is None


def test_all_values():
    env = dict(
        BASE_ENV,
        MINIMAX_MCP_MODE="SSE",
        MINIMAX_MCP_ADDR="0.0.0.0:9000",
        MINIMAX_MCP_BASE_PATH="/data/out",
        RESOURCE_MODE="data",
    )
    settings = load_settings(env=env)

    assert settings.mode == ServerMode.SSE
    assert (settings.host, settings.port) == ("0.0.0.0", 9000)
    assert settings.base_path == "/data/out"
    assert settings.resource_mode == ResourceMode.DATA


def test_settings_are_immutable():
    settings = load_settings(env=BASE_ENV)
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.resource_mode = ResourceMode.DATA


@pytest.mark.parametrize("missing", ["MINIMAX_API_KEY", "MINIMAX_API_HOST"])
def test_missing_credentials(missing):
    env = {k: v for k, v in BASE_ENV.items() if k != missing}
    with pytest.raises(ConfigError, match=missing):
        load_settings(env=env)


@pytest.mark.parametrize(
    "key, value",
    [
        ("MINIMAX_MCP_MODE", "websocket"),
        ("RESOURCE_MODE", "inline"),
        ("MINIMAX_MCP_ADDR", "localhost"),
        ("MINIMAX_MCP_ADDR", "localhost:http"),
    ],
)
def test_invalid_values(key, value):
    with pytest.raises(ConfigError):
        load_settings(env=dict(BASE_ENV, **{key: value}))


def test_load_settings_reads_dotenv(tmp_path, monkeypatch):
    # setenv first so teardown also removes what load_dotenv adds
    for key in ("MINIMAX_API_KEY", "MINIMAX_API_HOST", "RESOURCE_MODE", "MINIMAX_MCP_MODE", "MINIMAX_MCP_ADDR"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    dotenv = tmp_path / ".env"
    dotenv.write_text("MINIMAX_API_KEY=from-file\nMINIMAX_API_HOST=https://api.minimaxi.chat\nRESOURCE_MODE=data\n")

    settings = load_settings(dotenv_path=str(dotenv))

    assert settings.api_key == "from-file"
    assert settings.resource_mode == ResourceMode.DATA


def test_gaode_key():
    assert load_gaode_key(env={"GAODE_API_KEY": "amap"}) == "amap"
    with pytest.raises(ConfigError):
        load_gaode_key(env={})
