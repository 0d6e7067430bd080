# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the candidate_generator.py module."""

from iconfetcher.favicon.candidate_generator import generate_candidates


def test_includes_favicon_ico_with_unknown_size() -> None:
    """Test that the catalog contains the plain favicon.ico exactly once, unsized."""
    candidates = generate_candidates("example.com")

    matches = [c for c in candidates if c.href == "https://example.com/favicon.ico"]
    assert len(matches) == 1
    assert matches[0].size == 0
    assert matches[0].rel == "favicon.ico"


def test_catalog_order_and_size() -> None:
    """Test the full conventional catalog in dispatch order."""
    candidates = generate_candidates("example.com")

    assert len(candidates) == 44
    assert candidates[0].href == "https://example.com/apple-touch-icon-180x180-precomposed.png"
    assert candidates[-1].href == "https://example.com/mstile-70x70.png"
    assert len({c.href for c in candidates}) == len(candidates)


def test_all_candidates_are_https_and_unfetched() -> None:
    """Test that every candidate is an absolute https URL at the site root without payload."""
    for candidate in generate_candidates("www.example.org"):
        assert candidate.href.startswith("https://www.example.org/")
        assert "/" not in candidate.href.removeprefix("https://www.example.org/")
        assert candidate.data is None


def test_candidates_are_classified_by_filename() -> None:
    """Test that apple-touch-icon files are classified as such, sized from their name."""
    by_rel = {c.rel: c for c in generate_candidates("example.com")}

    assert by_rel["apple-touch-icon-152x152.png"].is_apple_touch_icon
    assert by_rel["apple-touch-icon-152x152.png"].size == 152
    assert by_rel["apple-touch-icon.png"].is_apple_touch_icon
    assert by_rel["apple-touch-icon.png"].size == 0
    assert not by_rel["touch-icon-192x192.png"].is_apple_touch_icon
    assert by_rel["touch-icon-192x192.png"].size == 192
    assert by_rel["favicon-96x96.ico"].size == 96
    assert by_rel["mstile-144x144.png"].size == 144


def test_ipv6_host_is_bracketed() -> None:
    """Test that an IPv6 host gives well formed URLs."""
    candidates = generate_candidates("::1")

    assert candidates[0].href.startswith("https://[::1]/")
