# SPDX-License-Identifier: Apache-2.0
"""
Client construction, configuration from the environment and lifecycle.
"""

import httpx
import pytest

from weaviate_sdk import ClientConfig, ValidationError, WeaviateClient

from .conftest import BASE_URL


def test_from_env_reads_weaviate_variables(monkeypatch):
    monkeypatch.setenv("WEAVIATE_URL", "https://cluster.example:443")
    monkeypatch.setenv("WEAVIATE_API_KEY", "secret")
    monkeypatch.setenv("WEAVIATE_TIMEOUT_S", "5")

    config = ClientConfig.from_env()

    assert config.url == "https://cluster.example:443"
    assert config.api_key == "secret"
    assert config.timeout_s == 5.0
    assert config.request_headers() == {"Authorization": "Bearer secret"}


def test_from_env_defaults_and_overrides(monkeypatch):
    for name in ("WEAVIATE_URL", "WEAVIATE_API_KEY", "WEAVIATE_TIMEOUT_S"):
        monkeypatch.delenv(name, raising=False)

    config = ClientConfig.from_env(timeout_s=2.5)

    assert config.url == "http://localhost:8080"
    assert config.api_key is None
    assert config.timeout_s == 2.5
    assert config.request_headers() == {}


def test_from_env_rejects_bad_timeout(monkeypatch):
    monkeypatch.setenv("WEAVIATE_TIMEOUT_S", "soon")
    with pytest.raises(ValidationError):
        ClientConfig.from_env()


@pytest.mark.parametrize("url", ["", "localhost:8080", "ftp://weaviate.test", "http://"])
def test_invalid_url_rejected(url):
    with pytest.raises(ValidationError):
        ClientConfig(url=url)


def test_non_positive_timeout_rejected():
    with pytest.raises(ValidationError):
        WeaviateClient.builder(BASE_URL).with_timeout(0).build()


def test_config_and_connection_arguments_are_exclusive():
    config = ClientConfig(url=BASE_URL)

    with pytest.raises(ValidationError) as exc_info:
        WeaviateClient(config=config, api_key="x", timeout_s=2.0)

    assert exc_info.value.details == {"field": "config", "conflicting": ["api_key", "timeout_s"]}


@pytest.mark.asyncio
async def test_config_with_http_client_and_metrics_is_accepted(server, metrics):
    server.add("GET", "/v1/.well-known/ready", status=200)
    http = httpx.AsyncClient(transport=httpx.MockTransport(server.handler))

    config = ClientConfig(url=BASE_URL, api_key="cfg-key")
    client = WeaviateClient(config=config, http_client=http, metrics=metrics)

    assert await client.is_ready() is True
    assert server.last.headers["authorization"] == "Bearer cfg-key"


@pytest.mark.asyncio
async def test_every_request_carries_auth_and_provider_headers(client, server):
    server.add("GET", "/v1/.well-known/live", status=200)

    await client.is_live()

    headers = server.last.headers
    assert headers["authorization"] == "Bearer test-key"
    assert headers["x-openai-api-key"] == "sk-test"
    assert str(server.last.url) == f"{BASE_URL}/v1/.well-known/live"


@pytest.mark.asyncio
async def test_builder_extra_headers_and_trailing_slash(server):
    http = httpx.AsyncClient(transport=httpx.MockTransport(server.handler))
    server.add("GET", "/v1/meta", json_body={"hostname": "h", "version": "1.24.0"})
    client = (
        WeaviateClient.builder(BASE_URL + "/")
        .with_header("X-Request-Source", "tests")
        .with_http_client(http)
        .build()
    )

    await client.meta.get()

    assert server.last.headers["x-request-source"] == "tests"
    assert "authorization" not in server.last.headers
    assert str(server.last.url) == f"{BASE_URL}/v1/meta"


@pytest.mark.asyncio
async def test_close_leaves_supplied_http_client_open(server):
    http = httpx.AsyncClient(transport=httpx.MockTransport(server.handler))
    client = WeaviateClient(BASE_URL, http_client=http)

    await client.close()

    assert not http.is_closed
    await http.aclose()


@pytest.mark.asyncio
async def test_owned_http_client_closed_on_exit():
    async with WeaviateClient(BASE_URL, timeout_s=3.0) as client:
        owned = client._transport._client
        assert owned.timeout.read == 3.0
    assert owned.is_closed


@pytest.mark.asyncio
async def test_from_env_client(monkeypatch, server, metrics):
    monkeypatch.setenv("WEAVIATE_URL", BASE_URL)
    monkeypatch.setenv("WEAVIATE_API_KEY", "env-key")
    server.add("GET", "/v1/.well-known/ready", status=200)
    http = httpx.AsyncClient(transport=httpx.MockTransport(server.handler))

    client = WeaviateClient.from_env(http_client=http, metrics=metrics)

    assert client.url == BASE_URL
    assert await client.is_ready() is True
    assert server.last.headers["authorization"] == "Bearer env-key"
    assert metrics.ops() == ["health.is_ready"]
