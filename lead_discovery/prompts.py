"""Prompt construction for grounded lead discovery."""

from __future__ import annotations

from typing import Union

from .models import CategoryOption


def category_value(category: Union[CategoryOption, str]) -> str:
    """Return the plain string form of a category option."""

    if isinstance(category, CategoryOption):
        return category.value
    return str(category).strip()


def _business_phrase(category: str) -> str:
    if not category or category == CategoryOption.ALL.value:
        return "local businesses of any category"
    return f"'{category}' businesses"


def build_discovery_prompt(
    category: Union[CategoryOption, str],
    location: str,
    min_results: int = 20,
) -> str:
    """Compose the instruction sent to the grounded discovery backend.

    The response schema is spelled out in the prompt text because structured
    output cannot be combined with the Google Maps grounding tool.
    """

    businesses = _business_phrase(category_value(category))
    count = max(20, min_results)

    return f"""
    Act as a specific Lead Discovery Agent for a Web Development & Automation Agency.
    Your goal is to find potential clients who need a website and RECOMMEND a specific digital automation for them.

    Task:
    Find at least {count} operational {businesses} in '{location}'.

    CRITICAL CRITERIA FOR SELECTION:
    1. STRICTLY prioritize businesses that DO NOT have a website listed.
    2. If a business uses a Facebook, Instagram, or other social media URL as their "website", treat this as "No Professional Website" and set the "website" field to null.
    3. Exclude large international franchises. Focus on local, independent businesses.

    For each business:
    1. Analyze its name and category to determine the best digital automation to sell them (e.g., Booking System, Order Automation, Inventory Sync).
    2. WRITE A SHORT COLD EMAIL (max 80 words) pitching this specific automation.

    Return a RAW JSON array (do not use Markdown code blocks) of objects with this exact schema:
    {{
      "name": string,
      "address": string,
      "rating": number,
      "user_ratings_total": number,
      "business_status": "OPERATIONAL",
      "website": string | null,
      "types": string[],
      "suggested_solution": string,
      "suggestion_reason": string,
      "email_draft_subject": string,
      "email_draft_body": string
    }}

    Field notes:
    - "suggested_solution": e.g. "Automated Reservation System".
    - "suggestion_reason": a short sentence explaining WHY.
    - "email_draft_subject": e.g. "Question about [Business Name] reservations".
    - "email_draft_body": professional, casual, offering to build the automation.

    IMPORTANT: If a website is not found, unknown, or is a social media link, explicitly set "website" to null.
    Respond with the JSON array only, with no introduction or explanation.
    """
