"""Core module for contributor-resolver."""

from core.models import ContributorRecord, DisplayMode
from core.config import ResolutionConfig

__all__ = [
    "ContributorRecord",
    "DisplayMode",
    "ResolutionConfig",
]
