"""Grouping keys for contributor records."""

from __future__ import annotations

from typing import Optional

from core.config import ResolutionConfig


def build_key(
    username: Optional[str],
    email: Optional[str],
    name: Optional[str],
    index: int,
) -> str:
    """
    Build the identity key for one record.

    Precedence: resolved username, then email, then display name (all
    lower-cased), then a positional anonymous key so records without any
    identity signal never group together.
    """
    for signal in (username, email, name):
        if signal:
            return signal.lower()
    return f"{ResolutionConfig.ANONYMOUS_KEY_PREFIX}{index}"
