"""Tests for BungieClientBuilder validation and header setup."""

from __future__ import annotations

import httpx
import pytest
from respx import MockRouter

from adapters.bungie_client import BungieClient, BungieClientBuilder
from adapters.http_client import LIBRARY_NAME, library_user_agent
from conftest import API_KEY, BASE_URL, envelope
from core.config import BungieSettings
from core.errors import ConfigurationError


@pytest.mark.parametrize("api_key", [None, "", "   "])
def test_build_without_api_key_fails(api_key: str | None) -> None:
    builder = BungieClient.builder()
    if api_key is not None:
        builder.with_api_key(api_key)

    with pytest.raises(ConfigurationError):
        builder.build()


def test_build_without_api_key_makes_no_request(respx_mock: MockRouter) -> None:
    with pytest.raises(ConfigurationError):
        BungieClient.builder().build()

    assert len(respx_mock.calls) == 0


@pytest.mark.parametrize("timeout", [0, -1.5])
def test_build_rejects_non_positive_timeout(timeout: float) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        BungieClient.builder().with_api_key(API_KEY).with_timeout(timeout).build()

    assert exc_info.value.details == {"timeout_seconds": timeout}


@pytest.mark.parametrize("base_url", ["ftp://www.bungie.net/Platform", "www.bungie.net/Platform", ""])
def test_build_rejects_non_http_base_url(base_url: str) -> None:
    with pytest.raises(ConfigurationError):
        BungieClient.builder().with_api_key(API_KEY).with_base_url(base_url).build()


def test_build_rejects_non_positive_oauth_client_id() -> None:
    with pytest.raises(ConfigurationError):
        BungieClient.builder().with_api_key(API_KEY).with_oauth_client_id(0).build()


async def test_base_url_trailing_slash_is_trimmed() -> None:
    async with BungieClient.builder().with_api_key(API_KEY).with_base_url(f"{BASE_URL}/").build() as client:
        assert client.base_url == BASE_URL


async def test_manifest_with_api_key(respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/Destiny2/Manifest/").mock(
        return_value=httpx.Response(200, json={"Response": {"version": "7.0.0.1"}, "ErrorCode": 1})
    )

    async with BungieClient.builder().with_api_key("KEY123").build() as client:
        manifest = await client.destiny2.get_destiny_manifest()

    assert manifest.version == "7.0.0.1"
    request = route.calls[0].request
    assert request.headers["x-api-key"] == "KEY123"
    assert "authorization" not in request.headers


async def test_configured_access_token_is_sent(respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/User/GetMembershipsForCurrentUser/").mock(
        return_value=httpx.Response(200, json=envelope({"destinyMemberships": []}))
    )

    builder = BungieClient.builder().with_api_key(API_KEY).with_access_token("tok-1")
    async with builder.build() as client:
        await client.user.get_membership_data_for_current_user()

    assert route.calls[0].request.headers["authorization"] == "Bearer tok-1"


async def test_per_call_access_token_overrides_configured(respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/User/GetMembershipsForCurrentUser/").mock(
        return_value=httpx.Response(200, json=envelope({"destinyMemberships": []}))
    )

    builder = BungieClient.builder().with_api_key(API_KEY).with_access_token("tok-1")
    async with builder.build() as client:
        await client.user.get_membership_data_for_current_user(access_token="tok-2")

    assert route.calls[0].request.headers["authorization"] == "Bearer tok-2"


async def test_user_agent_is_suffixed_with_library(respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/Destiny2/Manifest/").mock(
        return_value=httpx.Response(200, json=envelope({"version": "1"}))
    )

    async with BungieClient.builder().with_api_key(API_KEY).with_user_agent("MyApp/1.0").build() as client:
        await client.destiny2.get_destiny_manifest()

    user_agent = route.calls[0].request.headers["user-agent"]
    assert user_agent.startswith("MyApp/1.0 ")
    assert LIBRARY_NAME in user_agent


def test_library_user_agent_skips_blank_values() -> None:
    assert library_user_agent(None) is None
    assert library_user_agent("  ") is None


async def test_from_settings_prefills_builder(respx_mock: MockRouter) -> None:
    route = respx_mock.get("https://example.test/Platform/Destiny2/Manifest/").mock(
        return_value=httpx.Response(200, json=envelope({"version": "2"}))
    )
    settings = BungieSettings(
        _env_file=None,
        api_key="from-settings",
        base_url="https://example.test/Platform",
        access_token="settings-token",
    )

    async with BungieClientBuilder.from_settings(settings).build() as client:
        manifest = await client.destiny2.get_destiny_manifest()

    assert manifest.version == "2"
    assert route.calls[0].request.headers["x-api-key"] == "from-settings"
    assert route.calls[0].request.headers["authorization"] == "Bearer settings-token"


def test_from_settings_without_key_fails_on_build() -> None:
    builder = BungieClientBuilder.from_settings(BungieSettings(_env_file=None))

    with pytest.raises(ConfigurationError):
        builder.build()


@pytest.mark.parametrize(
    ("variable", "value"),
    [("D2_PLATFORM_HTTP_TIMEOUT_SECONDS", "0"), ("D2_PLATFORM_OAUTH_CLIENT_ID", "0")],
)
def test_from_settings_with_invalid_environment_fails(
    monkeypatch: pytest.MonkeyPatch,
    respx_mock: MockRouter,
    variable: str,
    value: str,
) -> None:
    monkeypatch.setenv("D2_PLATFORM_API_KEY", API_KEY)
    monkeypatch.setenv(variable, value)

    with pytest.raises(ConfigurationError) as exc_info:
        BungieClientBuilder.from_settings().build()

    assert variable.removeprefix("D2_PLATFORM_").lower() in exc_info.value.message
    assert exc_info.value.details["errors"]
    assert len(respx_mock.calls) == 0
