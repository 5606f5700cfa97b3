"""Tests for the actionability filter and social profile detection."""

import pytest

from lead_discovery.filters import filter_actionable, is_actionable, is_social_url, strip_social_website
from lead_discovery.models import BusinessStatus, Lead


def make_lead(idx=0, website=None, status=BusinessStatus.OPERATIONAL, name=None):
    return Lead(
        id=f"live_1_{idx}",
        name=name or f"Business {idx}",
        address="Porto",
        website=website,
        business_status=status,
        place_id=f"pid_{idx}",
    )


@pytest.mark.parametrize("website", [None, "", "   ", "\t\n"])
def test_missing_or_blank_website_is_actionable(website):
    assert is_actionable(make_lead(website=website))


def test_real_website_is_not_actionable():
    assert not is_actionable(make_lead(website="https://example.com"))


@pytest.mark.parametrize("status", [BusinessStatus.CLOSED_TEMPORARILY, BusinessStatus.CLOSED_PERMANENTLY])
def test_closed_business_is_not_actionable(status):
    assert not is_actionable(make_lead(status=status))


def test_filter_keeps_order_and_drops_websites():
    leads = [
        make_lead(0),
        make_lead(1, website="https://example.com"),
        make_lead(2, website=" "),
        make_lead(3, status=BusinessStatus.CLOSED_PERMANENTLY),
        make_lead(4),
    ]
    assert [lead.place_id for lead in filter_actionable(leads)] == ["pid_0", "pid_2", "pid_4"]


def test_filter_does_not_second_guess_social_urls():
    lead = make_lead(website="https://facebook.com/cafelua")
    assert filter_actionable([lead]) == []


@pytest.mark.parametrize(
    "url",
    [
        "https://facebook.com/cafelua",
        "https://www.facebook.com/cafelua",
        "http://m.facebook.com/pages/x",
        "instagram.com/padaria.sol",
        "https://linktr.ee/barbearia",
        "https://wa.me/351900000000",
        "HTTPS://WWW.INSTAGRAM.COM/Loja",
    ],
)
def test_social_urls_detected(url):
    assert is_social_url(url)


@pytest.mark.parametrize(
    "url",
    [None, "", "https://example.com", "https://notfacebook.com", "https://facebook.com.example.org"],
)
def test_non_social_urls(url):
    assert not is_social_url(url)


def test_strip_social_website_clears_profile_links():
    lead = make_lead(website="https://instagram.com/cafelua")
    stripped = strip_social_website(lead)

    assert stripped.website is None
    assert lead.website == "https://instagram.com/cafelua"
    assert is_actionable(stripped)


def test_strip_social_website_keeps_real_sites():
    lead = make_lead(website="https://cafelua.pt")
    assert strip_social_website(lead) is lead
