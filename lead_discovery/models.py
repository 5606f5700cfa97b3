"""Structured data models shared across the lead discovery pipeline."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class BusinessStatus(str, Enum):
    """Operating status reported for a business listing."""

    OPERATIONAL = "OPERATIONAL"
    CLOSED_TEMPORARILY = "CLOSED_TEMPORARILY"
    CLOSED_PERMANENTLY = "CLOSED_PERMANENTLY"


class CategoryOption(str, Enum):
    """Business categories offered to the user, plus the ``all`` sentinel."""

    ALL = "all"
    RESTAURANT = "restaurant"
    CAFE = "cafe"
    BAKERY = "bakery"
    HAIR_CARE = "hair_care"
    CLOTHING_STORE = "clothing_store"
    GYM = "gym"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    CategoryOption.ALL: "All Categories",
    CategoryOption.RESTAURANT: "Restaurants",
    CategoryOption.CAFE: "Cafes",
    CategoryOption.BAKERY: "Bakeries",
    CategoryOption.HAIR_CARE: "Hair care",
    CategoryOption.CLOTHING_STORE: "Retail",
    CategoryOption.GYM: "Wellness",
}


class Lead(BaseModel):
    """A normalized business record surfaced as a sales lead."""

    id: str = Field(description="Per-batch identifier minted at normalization time")
    name: str = Field(description="Business name")
    address: str = Field(description="Street address, or the searched location when unknown")
    rating: float = Field(default=0.0, ge=0, description="Star rating, 0 when unknown")
    user_ratings_total: int = Field(default=0, ge=0, description="Number of ratings, 0 when unknown")
    business_status: BusinessStatus = Field(
        default=BusinessStatus.OPERATIONAL, description="Operating status of the business"
    )
    website: Optional[str] = Field(
        default=None, description="Professional website; None and blank both mean no website"
    )
    types: List[str] = Field(default_factory=list, description="Ordered category tags")
    place_id: str = Field(description="Synthesized per-batch reference (pid_<index>), not a Maps place id")
    suggested_solution: Optional[str] = Field(
        default=None, description="Digital automation recommended for this business"
    )
    suggestion_reason: Optional[str] = Field(default=None, description="Why the solution fits")
    email_draft_subject: Optional[str] = Field(default=None, description="Cold email subject line")
    email_draft_body: Optional[str] = Field(default=None, description="Cold email body text")


class DiscoveryStatus(str, Enum):
    """Outcome tag for a single discovery backend call."""

    OK = "ok"
    MISSING_CREDENTIAL = "missing_credential"
    BACKEND_ERROR = "backend_error"


class DiscoveryResult(BaseModel):
    """Tagged outcome of the discovery call; failures carry an empty-list payload."""

    status: DiscoveryStatus
    text: str = Field(default="[]", description="Raw response text from the backend")
    error: Optional[str] = Field(default=None, description="Diagnostic message for failures")

    @property
    def ok(self) -> bool:
        return self.status == DiscoveryStatus.OK

    @classmethod
    def success(cls, text: Optional[str]) -> "DiscoveryResult":
        return cls(status=DiscoveryStatus.OK, text=text or "[]")

    @classmethod
    def failure(cls, status: DiscoveryStatus, error: str) -> "DiscoveryResult":
        return cls(status=status, error=error)
