import json

import httpx
import pytest

from sberbank_acquiring import (
    AcquiringClient,
    ConfigurationError,
    HttpxTransport,
    InvalidOptionError,
    NetworkException,
    Transport,
)


def _mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_httpx_transport_satisfies_protocol():
    assert isinstance(HttpxTransport(), Transport)


def test_tls_verification_disabled_by_default():
    assert HttpxTransport().verify_ssl is False
    assert HttpxTransport(verify_ssl=True).verify_ssl is True


@pytest.mark.asyncio
async def test_request_returns_status_and_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["content_type"] = request.headers["content-type"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, text='{"errorCode": 0}')

    async with HttpxTransport(client=_mock_client(handler)) as transport:
        status_code, body = await transport.request(
            "https://example.test/rest/register.do",
            "POST",
            {"Content-Type": "application/json"},
            '{"token": "abc"}',
        )

    assert (status_code, body) == (200, '{"errorCode": 0}')
    assert seen == {
        "method": "POST",
        "url": "https://example.test/rest/register.do",
        "content_type": "application/json",
        "body": {"token": "abc"},
    }


@pytest.mark.asyncio
async def test_non_200_is_returned_not_raised():
    transport = HttpxTransport(client=_mock_client(lambda request: httpx.Response(502, text="Bad gateway")))
    assert await transport.request("https://example.test/", "POST", {}, "{}") == (502, "Bad gateway")
    await transport.aclose()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("timed out"),
    ],
)
async def test_transport_errors_become_network_exception(error):
    def handler(request: httpx.Request) -> httpx.Response:
        raise error

    transport = HttpxTransport(client=_mock_client(handler))
    with pytest.raises(NetworkException) as exc_info:
        await transport.request("https://example.test/", "POST", {}, "{}")
    assert exc_info.value.__cause__ is error
    await transport.aclose()


@pytest.mark.asyncio
async def test_client_end_to_end_over_httpx():
    def handler(request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        assert payload["token"] == "abc"
        assert payload["jsonParams"] == {"a": True}
        return httpx.Response(200, json={"errorCode": "0", "orderId": "gw-1", "formUrl": "https://pay.test/gw-1"})

    transport = HttpxTransport(client=_mock_client(handler))
    client = AcquiringClient(token="abc", http_client=transport, api_uri="https://example.test")
    result = await client.register_order(1, 1, "returnUrl", {"jsonParams": {"a": True}})
    assert result == {"orderId": "gw-1", "formUrl": "https://pay.test/gw-1"}
    await transport.aclose()


@pytest.mark.asyncio
async def test_default_transport_created_lazily_and_closed():
    client = AcquiringClient(token="abc")
    assert client._transport is None
    transport = client.transport
    assert isinstance(transport, HttpxTransport)
    assert client.transport is transport
    async with client:
        pass
    assert client._transport is None


@pytest.mark.asyncio
async def test_injected_transport_not_closed_by_client():
    transport = HttpxTransport()
    client = AcquiringClient(token="abc", http_client=transport)
    await client.aclose()
    assert client.transport is transport


@pytest.mark.asyncio
async def test_invalid_url_becomes_configuration_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.InvalidURL("Invalid port: 'abc'")

    transport = HttpxTransport(client=_mock_client(handler))
    with pytest.raises(InvalidOptionError) as exc_info:
        await transport.request("https://example.test/", "POST", {}, "{}")
    assert isinstance(exc_info.value, ConfigurationError)
    assert exc_info.value.details == {"uri": "https://example.test/"}
    await transport.aclose()
