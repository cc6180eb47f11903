"""Unit tests for the page-facing contributors view (enablement + mode)."""

from __future__ import annotations

import pytest

from core.models import DisplayMode
from resolution.display import (
    build_contributors_view,
    contributors_enabled,
    disabled_reason,
    resolve_mode,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("site_contributors", "expected"),
    [
        (None, DisplayMode.INLINE),
        (True, DisplayMode.INLINE),
        (False, DisplayMode.INLINE),
        ({}, DisplayMode.INLINE),
        ({"mode": "block"}, DisplayMode.BLOCK),
        ({"mode": "inline"}, DisplayMode.INLINE),
        ({"mode": "sidebar"}, DisplayMode.INLINE),
        ({"mode": 3}, DisplayMode.INLINE),
        ({"mode": None}, DisplayMode.INLINE),
        ("block", DisplayMode.INLINE),
    ],
)
def test_resolve_mode(site_contributors, expected):
    """Only a mapping with a known mode changes the default."""
    assert resolve_mode(site_contributors) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    ("page", "site", "expected"),
    [
        (None, None, False),
        (None, False, False),
        (None, True, True),
        (None, {"mode": "block"}, True),
        (None, {}, False),
        (True, None, True),
        (True, False, True),
        (False, True, False),
        (False, {"mode": "block"}, False),
    ],
)
def test_contributors_enabled(page, site, expected):
    """Page flag overrides the site option."""
    assert contributors_enabled(page, site) is expected


@pytest.mark.unit
def test_disabled_view_is_empty_regardless_of_input(raw_history):
    view = build_contributors_view(raw_history, page_contributors=False, site_contributors={"mode": "block"})

    assert view.contributors == []
    assert view.has_contributors is False
    assert view.mode == DisplayMode.BLOCK


@pytest.mark.unit
def test_enabled_view_exposes_merged_list(raw_history):
    view = build_contributors_view(raw_history, site_contributors=True)

    assert view.has_contributors is True
    assert view.mode == "inline"
    assert [item.name for item in view.contributors] == ["alice", "Bob", "dependabot[bot]", ""]


@pytest.mark.unit
def test_enabled_view_with_empty_input():
    view = build_contributors_view([], page_contributors=True)

    assert view.contributors == []
    assert view.has_contributors is False


@pytest.mark.unit
def test_view_serialization_shape(raw_history):
    payload = build_contributors_view(raw_history, site_contributors={"mode": "block"}).to_dict()

    assert payload["mode"] == "block"
    assert payload["has_contributors"] is True
    assert payload["contributors"][0] == {
        "name": "alice",
        "email": "12345+alice@users.noreply.github.com",
        "url": "https://github.com/alice",
        "avatar": "https://img/alice.png",
        "commits": 6,
    }


@pytest.mark.unit
@pytest.mark.parametrize(
    ("page", "site", "expected"),
    [
        (None, None, "site"),
        (None, {}, "site"),
        (None, True, None),
        (False, True, "page"),
        (True, None, None),
    ],
)
def test_disabled_reason_names_the_hiding_setting(page, site, expected):
    """Unset page flag with no site option is hidden by the site setting."""
    assert disabled_reason(page, site) == expected


@pytest.mark.unit
def test_disabled_view_records_reason(raw_history):
    assert build_contributors_view(raw_history).disabled_reason == "site"
    assert build_contributors_view(raw_history, page_contributors=True).disabled_reason is None
