"""Configuration helpers for the lead discovery pipeline."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return float(value)


@dataclass(frozen=True)
class GeminiSettings:
    """Settings for the grounded Gemini discovery call."""

    model: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    api_key: str = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")
    temperature: Optional[float] = _optional_float("GEMINI_TEMPERATURE")
    timeout_seconds: float = float(os.getenv("GEMINI_TIMEOUT_SECONDS", "90"))


@dataclass(frozen=True)
class SearchSettings:
    """Search defaults shared by the pipeline and the CLI."""

    default_location: str = os.getenv("LEADS_DEFAULT_LOCATION", "Portugal")
    min_results: int = max(20, int(os.getenv("LEADS_MIN_RESULTS", "20")))
    page_size: int = int(os.getenv("LEADS_PAGE_SIZE", "8"))
    strict_social_filter: bool = os.getenv("LEADS_STRICT_SOCIAL_FILTER", "false").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


gemini_settings = GeminiSettings()
search_settings = SearchSettings()
