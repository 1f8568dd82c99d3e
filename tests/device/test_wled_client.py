import json

import httpx
import pytest

from device.errors import DeviceSessionError
from device.wled_client import WLEDJsonClient


def make_client(handler):
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://wled.test")
    return WLEDJsonClient("wled.test", client=http)


@pytest.mark.asyncio
async def test_get_state():
    def handler(request):
        assert request.method == "GET"
        assert request.url.path == "/json/state"
        return httpx.Response(200, json={"on": True, "bri": 77})

    client = make_client(handler)
    assert await client.get_state() == {"on": True, "bri": 77}
    await client.aclose()


@pytest.mark.asyncio
async def test_get_info():
    def handler(request):
        assert request.url.path == "/json/info"
        return httpx.Response(200, json={"name": "Desk", "ver": "0.14.0"})

    client = make_client(handler)
    assert (await client.get_info())["name"] == "Desk"
    await client.aclose()


@pytest.mark.asyncio
async def test_set_state_posts_json_payload():
    seen = []

    def handler(request):
        seen.append((request.method, request.url.path, json.loads(request.content)))
        return httpx.Response(200, json={"success": True})

    client = make_client(handler)
    await client.set_state({"bri": 128})
    await client.aclose()

    assert seen == [("POST", "/json/state", {"bri": 128})]


@pytest.mark.asyncio
async def test_http_error_status_becomes_device_error():
    client = make_client(lambda request: httpx.Response(500))

    with pytest.raises(DeviceSessionError):
        await client.get_state()
    await client.aclose()


@pytest.mark.asyncio
async def test_connection_error_becomes_device_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)

    with pytest.raises(DeviceSessionError):
        await client.get_info()
    await client.aclose()


@pytest.mark.asyncio
async def test_invalid_json_becomes_device_error():
    client = make_client(lambda request: httpx.Response(200, content=b"<html>"))

    with pytest.raises(DeviceSessionError):
        await client.get_state()
    await client.aclose()


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"[1, 2, 3]", b'"on"', b"42", b"null"])
async def test_non_object_json_becomes_device_error(body):
    client = make_client(lambda request: httpx.Response(200, content=body))

    with pytest.raises(DeviceSessionError, match="expected a JSON object"):
        await client.get_info()
    await client.aclose()
