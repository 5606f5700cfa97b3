"""Outreach links and result paging for discovered leads."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence
from urllib.parse import quote

from .models import Lead


@dataclass(frozen=True)
class Page:
    """One page of leads."""

    items: List[Lead]
    page: int
    page_size: int
    total_pages: int
    total_items: int


def _encode(value: str) -> str:
    return quote(value, safe="")


def maps_url(lead: Lead) -> str:
    """Google Maps search link for the business."""

    return f"https://www.google.com/maps/search/?api=1&query={_encode(f'{lead.name} {lead.address}')}"


def website_search_url(lead: Lead) -> str:
    """Web search used to double-check that the business really has no site."""

    return f"https://www.google.com/search?q={_encode(f'{lead.name} {lead.address} official website')}"


def mailto_url(lead: Lead, recipient: str = "") -> str:
    """mailto: link pre-filled with the lead's draft email."""

    subject = _encode(lead.email_draft_subject or "")
    body = _encode(lead.email_draft_body or "")
    return f"mailto:{recipient}?subject={subject}&body={body}"


def paginate(leads: Sequence[Lead], page: int, page_size: int) -> Page:
    """Slice out a 1-based page, clamping the page number into range."""

    if page_size < 1:
        raise ValueError("page_size must be at least 1")

    total_items = len(leads)
    total_pages = math.ceil(total_items / page_size)
    current = min(max(page, 1), max(total_pages, 1))
    start = (current - 1) * page_size
    return Page(
        items=list(leads[start : start + page_size]),
        page=current,
        page_size=page_size,
        total_pages=total_pages,
        total_items=total_items,
    )
