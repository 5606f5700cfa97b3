"""Lead discovery pipeline building blocks."""

from .models import BusinessStatus, CategoryOption, DiscoveryResult, DiscoveryStatus, Lead
from .pipeline import LeadDiscoveryPipeline, SearchSession, find_leads

__all__ = [
    "BusinessStatus",
    "CategoryOption",
    "DiscoveryResult",
    "DiscoveryStatus",
    "Lead",
    "LeadDiscoveryPipeline",
    "SearchSession",
    "find_leads",
]
