"""
Unit tests for ProviderClient failure classification and secret handling.
"""

import asyncio

import httpx
import pytest
from pydantic import BaseModel

from gateway.services.provider_client import ProviderClient, extract_error_message
from gateway.shared.errors import (
    ProviderShapeError,
    ProviderStatusError,
    ProviderTimeoutError,
    ProviderTransportError,
)
from gateway.shared.utils import mask_key, redact_secret

from tests.conftest import API_KEY, BASE_URL, FakeProvider


class Answer(BaseModel):
    value: int


def post_json(provider: FakeProvider, path: str = "/answer"):
    async def _post():
        async with httpx.AsyncClient(transport=httpx.MockTransport(provider)) as http_client:
            client = ProviderClient(http_client, API_KEY, BASE_URL + "/")
            return await client.post_json(path, {"question": 1}, Answer)
    return asyncio.run(_post())


def test_success_is_parsed_into_model():
    provider = FakeProvider()
    provider.respond("/answer", json={"value": 42, "extra": "ignored"})

    assert post_json(provider) == Answer(value=42)
    assert str(provider.calls[0].url) == f"{BASE_URL}/answer"
    assert provider.calls[0].headers["Authorization"] == f"Bearer {API_KEY}"


def test_non_2xx_is_a_status_error_with_redacted_message():
    provider = FakeProvider()
    provider.respond("/answer", status_code=429, json={"error": {"message": f"Rate limit for key {API_KEY}"}})

    with pytest.raises(ProviderStatusError) as exc_info:
        post_json(provider)

    assert exc_info.value.provider_status == 429
    assert exc_info.value.status_code == 502
    assert API_KEY not in exc_info.value.detail
    assert mask_key(API_KEY) in exc_info.value.detail


@pytest.mark.parametrize(
    "exc_class, expected, status_code",
    [
        (httpx.ConnectError, ProviderTransportError, 503),
        (httpx.ConnectTimeout, ProviderTimeoutError, 504),
        (httpx.ReadTimeout, ProviderTimeoutError, 504),
        (httpx.RemoteProtocolError, ProviderTransportError, 503),
    ],
)
def test_network_failures_are_transport_errors(exc_class, expected, status_code):
    provider = FakeProvider()
    provider.fail("/answer", exc_class, "network down")

    with pytest.raises(expected) as exc_info:
        post_json(provider)

    assert exc_info.value.status_code == status_code
    assert len(provider.calls) == 1


@pytest.mark.parametrize("kwargs", [{"content": b"not json"}, {"json": {"value": "many"}}, {"json": []}])
def test_unexpected_body_is_a_shape_error(kwargs):
    provider = FakeProvider()
    provider.respond("/answer", **kwargs)

    with pytest.raises(ProviderShapeError):
        post_json(provider)


def test_extract_error_message_variants():
    assert extract_error_message(httpx.Response(400, json={"error": {"message": "bad"}})) == "bad"
    assert extract_error_message(httpx.Response(400, json={"error": "plain"})) == "plain"
    assert extract_error_message(httpx.Response(500, text="upstream exploded")) == "upstream exploded"
    assert extract_error_message(httpx.Response(502, content=b"")) == "Bad Gateway"


def test_mask_key_and_redact_secret():
    assert mask_key(None) == "<none>"
    assert mask_key("short") == "****"
    assert mask_key("sk-abcdefghijkl") == "sk-a...ijkl"
    assert redact_secret(f"key={API_KEY}!", API_KEY) == f"key={mask_key(API_KEY)}!"
    assert redact_secret("nothing here", "") == "nothing here"
