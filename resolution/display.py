"""Page-facing contributor values: merged list, display mode, and visibility."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from core.config import ResolutionConfig
from core.models import ContributorRecord, DisplayMode
from resolution.merge import merge_contributors


def resolve_mode(site_contributors: Any) -> DisplayMode:
    """
    Read the display mode from the site-level contributors option.

    Only a mapping with a known `mode` value selects a mode; anything else
    falls back to the default.
    """
    if not isinstance(site_contributors, Mapping):
        return ResolutionConfig.DEFAULT_MODE

    mode = site_contributors.get("mode")
    if isinstance(mode, str):
        try:
            return DisplayMode(mode)
        except ValueError:
            pass
    return ResolutionConfig.DEFAULT_MODE


def disabled_reason(page_contributors: Optional[bool], site_contributors: Any) -> Optional[str]:
    """
    Name the setting that hides contributors, or None when they are shown.

    The effective flag is the page flag when it is set, otherwise
    `bool(site_contributors)`. An unset page flag with no site option
    therefore hides contributors ("site").
    """
    if page_contributors is not None:
        return "page" if page_contributors is False else None
    return None if site_contributors else "site"


def contributors_enabled(page_contributors: Optional[bool], site_contributors: Any) -> bool:
    """Page flag when set, else `bool(site_contributors)`."""
    return disabled_reason(page_contributors, site_contributors) is None


@dataclass(frozen=True)
class ContributorsView:
    """Read-only values exposed to the page template."""

    contributors: list[ContributorRecord]
    mode: DisplayMode
    disabled_reason: Optional[str] = None

    @property
    def has_contributors(self) -> bool:
        """True when at least one contributor will be shown."""
        return len(self.contributors) > 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize into output JSON shape."""
        return {
            "mode": self.mode.value,
            "has_contributors": self.has_contributors,
            "contributors": [item.to_dict() for item in self.contributors],
        }


def build_contributors_view(
    raw: Iterable[ContributorRecord | Mapping[str, Any]],
    *,
    page_contributors: Optional[bool] = None,
    site_contributors: Any = None,
) -> ContributorsView:
    """Merge the raw list unless contributors are disabled for this page."""
    mode = resolve_mode(site_contributors)
    reason = disabled_reason(page_contributors, site_contributors)
    if reason is not None:
        return ContributorsView(contributors=[], mode=mode, disabled_reason=reason)
    return ContributorsView(contributors=merge_contributors(raw), mode=mode)
