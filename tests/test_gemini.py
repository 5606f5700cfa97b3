"""Tests for the grounded discovery client."""

import asyncio
import logging

import httpx
from google.genai import errors

from lead_discovery.config import GeminiSettings
from lead_discovery.gemini import discover_businesses
from lead_discovery.models import DiscoveryStatus


def test_missing_credential_skips_network(fake_backend, caplog):
    backend = fake_backend(text="[]")
    with caplog.at_level(logging.ERROR, logger="lead_discovery.gemini"):
        result = asyncio.run(discover_businesses("prompt", GeminiSettings(api_key=""), client_factory=backend))

    assert result.status == DiscoveryStatus.MISSING_CREDENTIAL
    assert result.text == "[]"
    assert backend.factory_calls == 0
    assert backend.models.calls == []
    assert "API key is missing" in caplog.text


def test_request_uses_model_prompt_and_maps_tool(fake_backend):
    backend = fake_backend(text='[{"name": "Cafe Lua"}]')
    settings = GeminiSettings(api_key="key", model="gemini-test")
    result = asyncio.run(discover_businesses("find cafes", settings, client_factory=backend))

    assert result.ok
    assert result.text == '[{"name": "Cafe Lua"}]'
    assert backend.factory_calls == 1
    call = backend.models.calls[0]
    assert call["model"] == "gemini-test"
    assert call["contents"] == "find cafes"
    config = call["config"]
    assert config.tools[0].google_maps is not None
    assert config.response_schema is None
    assert config.response_mime_type is None


def test_ungrounded_request_has_no_tools(fake_backend):
    backend = fake_backend(text="[]")
    asyncio.run(discover_businesses("p", GeminiSettings(api_key="key"), grounded=False, client_factory=backend))
    assert backend.models.calls[0]["config"].tools is None


def test_empty_response_becomes_empty_list(fake_backend, caplog):
    backend = fake_backend(text=None)
    with caplog.at_level(logging.WARNING, logger="lead_discovery.gemini"):
        result = asyncio.run(discover_businesses("p", GeminiSettings(api_key="key"), client_factory=backend))

    assert result.ok
    assert result.text == "[]"
    assert "returned no text" in caplog.text


def test_api_error_is_captured(fake_backend):
    exc = errors.ClientError(
        429, {"error": {"code": 429, "message": "quota exhausted", "status": "RESOURCE_EXHAUSTED"}}
    )
    backend = fake_backend(exc=exc)
    result = asyncio.run(discover_businesses("p", GeminiSettings(api_key="key"), client_factory=backend))

    assert result.status == DiscoveryStatus.BACKEND_ERROR
    assert result.text == "[]"
    assert "quota exhausted" in result.error


def test_timeout_is_captured(fake_backend, caplog):
    backend = fake_backend(exc=httpx.ReadTimeout("read timed out"))
    with caplog.at_level(logging.ERROR, logger="lead_discovery.gemini"):
        result = asyncio.run(discover_businesses("p", GeminiSettings(api_key="key"), client_factory=backend))

    assert result.status == DiscoveryStatus.BACKEND_ERROR
    assert "ReadTimeout" in caplog.text


def test_unexpected_error_is_captured(fake_backend):
    backend = fake_backend(exc=RuntimeError("boom"))
    result = asyncio.run(discover_businesses("p", GeminiSettings(api_key="key"), client_factory=backend))

    assert result.status == DiscoveryStatus.BACKEND_ERROR
    assert result.error == "boom"


def test_client_construction_failure_is_captured():
    def broken_factory(settings):
        raise ValueError("bad credentials format")

    result = asyncio.run(discover_businesses("p", GeminiSettings(api_key="key"), client_factory=broken_factory))
    assert result.status == DiscoveryStatus.BACKEND_ERROR
