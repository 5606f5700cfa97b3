"""Command-line entry point for the lead discovery workflow."""

from __future__ import annotations

import asyncio
import json
import logging
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from lead_discovery.config import search_settings
from lead_discovery.models import CategoryOption, Lead
from lead_discovery.outreach import mailto_url, maps_url, paginate, website_search_url
from lead_discovery.pipeline import LeadDiscoveryPipeline


def _serialize(leads: List[Lead]) -> List[Dict[str, Any]]:
    """Convert pydantic objects to plain dictionaries, adding outreach links."""

    return [
        {
            **lead.model_dump(mode="json"),
            "maps_url": maps_url(lead),
            "website_search_url": website_search_url(lead),
            "mailto_url": mailto_url(lead),
        }
        for lead in leads
    ]


def _category_help() -> str:
    options = ", ".join(f"{option.value} ({option.label})" for option in CategoryOption)
    return f"Business category to search for: {options}"


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Find local businesses without a website using Gemini + Google Maps")
    parser.add_argument(
        "location",
        nargs="?",
        default="",
        help=f'City or region to search (e.g., "Porto"); defaults to {search_settings.default_location}',
    )
    parser.add_argument(
        "--category",
        choices=[option.value for option in CategoryOption],
        default=CategoryOption.RESTAURANT.value,
        help=_category_help(),
    )
    parser.add_argument("--page", type=int, default=1, help="Page of results to print (1-based)")
    parser.add_argument(
        "--page-size",
        type=int,
        default=search_settings.page_size,
        help="Number of leads per printed page",
    )
    parser.add_argument("--output", help="Optional JSON file path for exporting every lead")
    parser.add_argument(
        "--strict-social",
        action="store_true",
        default=search_settings.strict_social_filter,
        help="Also drop websites that are only social media profiles",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args: Namespace = parser.parse_args(argv)
    if args.page_size < 1:
        parser.error("--page-size must be at least 1")

    logging.basicConfig(
        level=search_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pipeline = LeadDiscoveryPipeline(strict_social_filter=args.strict_social)
    leads = asyncio.run(pipeline.run(args.category, args.location))

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(json.dumps(_serialize(leads), indent=2))
        print(f"Saved {len(leads)} leads to {output_path}")

    page = paginate(leads, args.page, args.page_size)
    print(json.dumps(_serialize(page.items), indent=2))
    if not leads:
        print("No leads found.")
    else:
        print(f"Page {page.page} of {page.total_pages} ({page.total_items} leads)")


if __name__ == "__main__":
    main()
