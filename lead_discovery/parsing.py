"""Turn raw discovery text into normalized Lead records."""

from __future__ import annotations

import json
import logging
import math
import re
import time
from typing import Any, Dict, List, Optional

from .models import BusinessStatus, Lead


logger = logging.getLogger(__name__)

_FENCE = re.compile(r"```[A-Za-z0-9_+-]*")

UNKNOWN_NAME = "Unknown Business"
DEFAULT_SOLUTION = "Professional Landing Page"
DEFAULT_REASON = "Establishing a digital presence helps attract local organic traffic."


def sanitize_response(text: Optional[str]) -> str:
    """Strip code-fence markers (with or without a language tag) and surrounding whitespace."""

    cleaned = (text or "").strip()
    while True:
        stripped = _FENCE.sub("", cleaned).strip()
        if stripped == cleaned:
            return cleaned
        cleaned = stripped


def _text(value: Any) -> Optional[str]:
    if not value or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    if isinstance(value, (dict, list)):
        return None
    return str(value)


def _number(value: Any) -> float:
    """Coerce a numeric-like value; anything unusable becomes 0."""

    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0.0
    return number


def _types(value: Any, category: str) -> List[str]:
    if not isinstance(value, list):
        return [category]
    return [str(tag) for tag in value if tag is not None and str(tag).strip()]


def default_email_subject(name: str) -> str:
    return f"Quick question about {name}"


def default_email_body(name: str, suggested_solution: Optional[str]) -> str:
    return (
        f"Hi team,\n\nI noticed {name} doesn't have a main website. "
        "I help local businesses automate their workflows. "
        f"Would you be open to a quick chat about setting up a {suggested_solution or 'digital system'}?"
    )


def build_lead(item: Dict[str, Any], idx: int, category: str, location: str, batch_stamp: int) -> Lead:
    """Apply the per-field default policy to one raw record."""

    name = _text(item.get("name")) or UNKNOWN_NAME
    raw_solution = _text(item.get("suggested_solution"))

    return Lead(
        id=f"live_{batch_stamp}_{idx}",
        name=name,
        address=_text(item.get("address")) or location,
        rating=_number(item.get("rating")),
        user_ratings_total=int(_number(item.get("user_ratings_total"))),
        # Only operational businesses are requested upstream.
        business_status=BusinessStatus.OPERATIONAL,
        website=_text(item.get("website")),
        types=_types(item.get("types"), category),
        place_id=f"pid_{idx}",
        suggested_solution=raw_solution or DEFAULT_SOLUTION,
        suggestion_reason=_text(item.get("suggestion_reason")) or DEFAULT_REASON,
        email_draft_subject=_text(item.get("email_draft_subject")) or default_email_subject(name),
        email_draft_body=_text(item.get("email_draft_body")) or default_email_body(name, raw_solution),
    )


def normalize_leads(
    text: str,
    category: str,
    location: str,
    *,
    raw_text: Optional[str] = None,
    batch_stamp: Optional[int] = None,
) -> List[Lead]:
    """Parse sanitized text into Lead records.

    Returns an empty list when the text is not valid JSON or is not a JSON
    array. Individual records never fail: missing or malformed fields fall back
    to their defaults, and non-object entries are treated as empty records.
    """

    try:
        payload = json.loads(text)
    except (ValueError, RecursionError) as exc:
        logger.error("Failed to parse business data: %s", exc)
        logger.debug("Raw output: %s", raw_text if raw_text is not None else text)
        return []

    if not isinstance(payload, list):
        logger.warning("Expected a JSON array of businesses, got %s", type(payload).__name__)
        return []

    stamp = batch_stamp if batch_stamp is not None else int(time.time() * 1000)
    return [
        build_lead(item if isinstance(item, dict) else {}, idx, category, location, stamp)
        for idx, item in enumerate(payload)
    ]
