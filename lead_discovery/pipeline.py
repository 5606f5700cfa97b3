"""High-level orchestration for the lead discovery flow."""

from __future__ import annotations

import itertools
import logging
from typing import List, Optional, Union

from .config import GeminiSettings, SearchSettings, gemini_settings, search_settings
from .filters import filter_actionable, strip_social_website
from .gemini import ClientFactory, discover_businesses
from .models import CategoryOption, Lead
from .parsing import normalize_leads, sanitize_response
from .prompts import build_discovery_prompt, category_value


logger = logging.getLogger(__name__)


class LeadDiscoveryPipeline:
    """Coordinate prompt building, grounded discovery, normalization, and filtering."""

    def __init__(
        self,
        gemini: Optional[GeminiSettings] = None,
        search: Optional[SearchSettings] = None,
        client_factory: Optional[ClientFactory] = None,
        strict_social_filter: Optional[bool] = None,
    ) -> None:
        self.gemini = gemini or gemini_settings
        self.search = search or search_settings
        self.client_factory = client_factory
        if strict_social_filter is None:
            strict_social_filter = self.search.strict_social_filter
        self.strict_social_filter = strict_social_filter

    def resolve_location(self, location: Optional[str]) -> str:
        return (location or "").strip() or self.search.default_location

    async def run(self, category: Union[CategoryOption, str], location: Optional[str] = None) -> List[Lead]:
        """Execute one search; every failure yields an empty list."""

        category_name = category_value(category)
        search_location = self.resolve_location(location)
        logger.info("Searching for %s in %s using Gemini discovery...", category_name, search_location)

        prompt = build_discovery_prompt(category_name, search_location, self.search.min_results)
        result = await discover_businesses(prompt, self.gemini, client_factory=self.client_factory)
        if not result.ok:
            logger.info("Discovery returned no data (%s)", result.status.value)
            return []

        cleaned = sanitize_response(result.text)
        leads = normalize_leads(cleaned, category_name, search_location, raw_text=result.text)
        if self.strict_social_filter:
            leads = [strip_social_website(lead) for lead in leads]

        actionable = filter_actionable(leads)
        logger.info("Kept %d of %d businesses as actionable leads", len(actionable), len(leads))
        return actionable


class SearchSession:
    """Holds the latest search result, discarding responses superseded by a newer search."""

    def __init__(self, pipeline: Optional[LeadDiscoveryPipeline] = None) -> None:
        self.pipeline = pipeline or LeadDiscoveryPipeline()
        self._counter = itertools.count(1)
        self._latest = 0
        self.leads: Optional[List[Lead]] = None

    @property
    def latest_token(self) -> int:
        return self._latest

    def begin(self) -> int:
        self._latest = next(self._counter)
        return self._latest

    def accept(self, token: int, leads: List[Lead]) -> bool:
        if token != self._latest:
            logger.debug("Dropping stale search result %d (latest is %d)", token, self._latest)
            return False
        self.leads = leads
        return True

    async def search(
        self, category: Union[CategoryOption, str], location: Optional[str] = None
    ) -> Optional[List[Lead]]:
        """Run a search; returns None when a newer search started while this one was pending."""

        token = self.begin()
        leads = await self.pipeline.run(category, location)
        if not self.accept(token, leads):
            return None
        return leads


async def find_leads(category: Union[CategoryOption, str], location: Optional[str] = None) -> List[Lead]:
    """Convenience entry point."""

    pipeline = LeadDiscoveryPipeline()
    return await pipeline.run(category, location)
