import json

import httpx
import pytest

from chatrelay.client.relay.relay_client import RelayClient
from chatrelay.exceptions import NetworkError


def _relay_with(handler) -> RelayClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return RelayClient("http://relay.test/", http_client=http_client)


@pytest.mark.asyncio
async def test_send_posts_message_and_history():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"reply": "ok"})

    relay = _relay_with(handler)
    history = [{"role": "assistant", "content": "greeting"}]

    reply = await relay.send("hello", history)
    await relay.aclose()

    assert reply == "ok"
    assert seen["url"] == "http://relay.test/api/chat"
    assert seen["body"] == {"message": "hello", "history": history}


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"reply": None}, {"reply": 3}, ["ok"]])
async def test_send_without_usable_reply_returns_none(payload):
    relay = _relay_with(lambda request: httpx.Response(200, json=payload))

    assert await relay.send("hello", []) is None


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [400, 500, 503])
async def test_send_error_status_raises_network_error(status):
    relay = _relay_with(lambda request: httpx.Response(status, json={"error": "Failed to generate a reply."}))

    with pytest.raises(NetworkError):
        await relay.send("hello", [])


@pytest.mark.asyncio
async def test_send_connection_failure_raises_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    relay = _relay_with(handler)

    with pytest.raises(NetworkError):
        await relay.send("hello", [])


@pytest.mark.asyncio
async def test_send_invalid_body_raises_network_error():
    relay = _relay_with(lambda request: httpx.Response(200, content=b"<html>proxy error</html>"))

    with pytest.raises(NetworkError):
        await relay.send("hello", [])


def test_default_base_url_comes_from_config(monkeypatch):
    import chatrelay.config.config as configs

    monkeypatch.setattr(configs, "CHAT_API_URL", "http://configured:9000")

    assert RelayClient().chat_endpoint == "http://configured:9000/api/chat"
