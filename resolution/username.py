"""Platform-handle extraction from explicit fields, profile URLs, and no-reply emails."""

from __future__ import annotations

import re
from typing import Callable, Optional
from urllib.parse import urlsplit

from core.config import ResolutionConfig
from core.models import ContributorRecord


# Used with fullmatch: a trailing newline is not accepted.
_NOREPLY_EMAIL_PATTERN = re.compile(
    rf"(.+?)@{re.escape(ResolutionConfig.NOREPLY_EMAIL_DOMAIN)}",
    re.IGNORECASE,
)


def _is_profile_host(hostname: str) -> bool:
    """True for the profile host itself or any of its subdomains."""
    host = hostname.lower()
    profile_host = ResolutionConfig.PROFILE_HOST
    return host == profile_host or host.endswith("." + profile_host)


def extract_username_from_url(url: str) -> Optional[str]:
    """
    Extract a handle from a profile URL.

    Shapes (v0):
    - /{username}            -> username
    - /apps/{app-name}       -> app-name[bot]
    - /anything/.../{last}   -> last segment

    Unparsable URLs and URLs on other hosts yield None.
    """
    try:
        parsed = urlsplit(url.strip())
        hostname = parsed.hostname
    except ValueError:
        return None

    if not hostname or not _is_profile_host(hostname):
        return None

    segments = [segment for segment in parsed.path.split("/") if segment]
    if not segments:
        return None

    if len(segments) == 1:
        return segments[0]

    if segments[0] == ResolutionConfig.APP_PATH_SEGMENT:
        return f"{segments[1]}{ResolutionConfig.BOT_MARKER}"

    return segments[-1]


def extract_username_from_email(email: str) -> Optional[str]:
    """
    Extract a handle from a platform no-reply commit email.

    `12345+alice@users.noreply.github.com` -> `alice`
    `bob@users.noreply.github.com`         -> `bob`
    """
    match = _NOREPLY_EMAIL_PATTERN.fullmatch(email)
    if not match:
        return None

    local = match.group(1)
    _, separator, handle = local.partition(ResolutionConfig.ACCOUNT_ID_SEPARATOR)
    if separator:
        return handle
    return local


def _from_explicit_field(record: ContributorRecord) -> Optional[str]:
    return record.username or None


def _from_profile_url(record: ContributorRecord) -> Optional[str]:
    if not record.url:
        return None
    return extract_username_from_url(record.url)


def _from_commit_email(record: ContributorRecord) -> Optional[str]:
    if not record.email:
        return None
    return extract_username_from_email(record.email)


# Precedence order: first non-empty result wins.
USERNAME_EXTRACTORS: tuple[Callable[[ContributorRecord], Optional[str]], ...] = (
    _from_explicit_field,
    _from_profile_url,
    _from_commit_email,
)


def resolve_username(record: ContributorRecord) -> Optional[str]:
    """Resolve the canonical handle for a record, or None when no signal exists."""
    for extractor in USERNAME_EXTRACTORS:
        username = extractor(record)
        if username:
            return username
    return None
