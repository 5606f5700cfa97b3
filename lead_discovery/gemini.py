"""Grounded Gemini discovery calls."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import httpx
from google import genai
from google.genai import errors, types

from .config import GeminiSettings, gemini_settings
from .models import DiscoveryResult, DiscoveryStatus


logger = logging.getLogger(__name__)

ClientFactory = Callable[[GeminiSettings], Any]


def build_client(settings: GeminiSettings) -> genai.Client:
    """Create a Gemini client whose requests are bounded by the configured timeout."""

    return genai.Client(
        api_key=settings.api_key,
        http_options=types.HttpOptions(timeout=int(settings.timeout_seconds * 1000)),
    )


def _generation_config(settings: GeminiSettings, grounded: bool) -> types.GenerateContentConfig:
    # response_schema / response_mime_type are rejected when the Maps tool is enabled.
    tools = [types.Tool(google_maps=types.GoogleMaps())] if grounded else None
    return types.GenerateContentConfig(tools=tools, temperature=settings.temperature)


async def discover_businesses(
    prompt: str,
    settings: Optional[GeminiSettings] = None,
    *,
    grounded: bool = True,
    client_factory: Optional[ClientFactory] = None,
) -> DiscoveryResult:
    """Send one grounded generation request and return the raw response text.

    Never raises for configuration or backend problems; the returned
    ``DiscoveryResult`` carries the failure instead.
    """

    settings = settings or gemini_settings
    if not settings.api_key:
        logger.error("Gemini API key is missing; set GEMINI_API_KEY or API_KEY.")
        return DiscoveryResult.failure(DiscoveryStatus.MISSING_CREDENTIAL, "missing API key")

    factory = client_factory or build_client
    try:
        client = factory(settings)
        response = await client.aio.models.generate_content(
            model=settings.model,
            contents=prompt,
            config=_generation_config(settings, grounded),
        )
        text = response.text
    except errors.APIError as exc:
        logger.error("Discovery backend rejected the request (code=%s): %s", exc.code, exc)
        return DiscoveryResult.failure(DiscoveryStatus.BACKEND_ERROR, str(exc))
    except httpx.HTTPError as exc:
        logger.error("Discovery backend unreachable (%s): %s", type(exc).__name__, exc)
        return DiscoveryResult.failure(DiscoveryStatus.BACKEND_ERROR, str(exc) or type(exc).__name__)
    except Exception as exc:
        logger.exception("Unexpected discovery backend failure")
        return DiscoveryResult.failure(DiscoveryStatus.BACKEND_ERROR, str(exc) or type(exc).__name__)

    if not text:
        logger.warning("Discovery backend returned no text for model %s", settings.model)
    return DiscoveryResult.success(text)
