"""Shared fixtures: a client pointed at the default base URL and an isolated environment."""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator, Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog

from adapters.bungie_client import BungieClient

BASE_URL = "https://www.bungie.net/Platform"
API_KEY = "KEY123"


def envelope(response: Any, error_code: int = 1, **extra: Any) -> dict[str, Any]:
    """Standard platform envelope around `response`."""
    body: dict[str, Any] = {
        "Response": response,
        "ErrorCode": error_code,
        "ThrottleSeconds": 0,
        "ErrorStatus": "Success" if error_code == 1 else "Error",
        "Message": "Ok" if error_code == 1 else "Failed",
        "MessageData": {},
    }
    body.update(extra)
    return body


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """No D2_PLATFORM_* variables, no project .env, user config under tmp."""
    for key in list(os.environ):
        if key.startswith("D2_PLATFORM_"):
            monkeypatch.delenv(key, raising=False)
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("APPDATA", str(config_home))
    monkeypatch.chdir(tmp_path)
    return config_home


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo `configure_logging` calls made by CLI and logging tests."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
async def client() -> AsyncIterator[BungieClient]:
    async with BungieClient.builder().with_api_key(API_KEY).build() as bungie_client:
        yield bungie_client


@pytest.fixture
async def oauth_client() -> AsyncIterator[BungieClient]:
    builder = (
        BungieClient.builder()
        .with_api_key(API_KEY)
        .with_oauth_client_id(12345)
        .with_oauth_client_secret("s3cret")
    )
    async with builder.build() as bungie_client:
        yield bungie_client
