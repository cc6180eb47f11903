"""Identity-resolution utilities."""

from resolution.display import ContributorsView, build_contributors_view
from resolution.keys import build_key
from resolution.merge import merge_contributors
from resolution.username import (
    extract_username_from_email,
    extract_username_from_url,
    resolve_username,
)

__all__ = [
    "ContributorsView",
    "build_contributors_view",
    "build_key",
    "merge_contributors",
    "resolve_username",
    "extract_username_from_url",
    "extract_username_from_email",
]
