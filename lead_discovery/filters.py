"""Actionability rules applied to normalized leads."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional
from urllib.parse import urlparse

from .models import BusinessStatus, Lead


logger = logging.getLogger(__name__)

SOCIAL_DOMAINS = frozenset(
    {
        "facebook.com",
        "fb.com",
        "fb.me",
        "instagram.com",
        "twitter.com",
        "x.com",
        "tiktok.com",
        "linkedin.com",
        "youtube.com",
        "pinterest.com",
        "threads.net",
        "linktr.ee",
        "wa.me",
        "whatsapp.com",
    }
)


def has_website(lead: Lead) -> bool:
    return bool(lead.website and lead.website.strip())


def is_actionable(lead: Lead) -> bool:
    """Operational and without a professional website."""

    return lead.business_status == BusinessStatus.OPERATIONAL and not has_website(lead)


def filter_actionable(leads: Iterable[Lead]) -> List[Lead]:
    """Keep actionable leads, preserving their order."""

    return [lead for lead in leads if is_actionable(lead)]


def _host(url: str) -> Optional[str]:
    candidate = url.strip()
    if "://" not in candidate:
        candidate = f"http://{candidate}"
    host = urlparse(candidate).hostname
    return host.lower() if host else None


def is_social_url(url: Optional[str]) -> bool:
    """True when the URL points at a social or link-in-bio host (subdomains included)."""

    if not url or not url.strip():
        return False
    host = _host(url)
    if not host:
        return False
    return any(host == domain or host.endswith(f".{domain}") for domain in SOCIAL_DOMAINS)


def strip_social_website(lead: Lead) -> Lead:
    """Return a copy without the website when it is only a social profile."""

    if not is_social_url(lead.website):
        return lead
    logger.debug("Treating social profile %s as no website for %s", lead.website, lead.name)
    return lead.model_copy(update={"website": None})
