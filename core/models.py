"""
Core Pydantic models for contributor-resolver.

Design principles:
- Records are immutable values flowing through the pipeline (copies, never in-place edits)
- Unknown keys on a raw record are carried along untouched
- Deterministic serialization (absent values omitted)
"""

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================

class DisplayMode(str, Enum):
    """How the page lays out the contributor list."""
    INLINE = "inline"
    BLOCK = "block"


# ============================================================================
# Contributor
# ============================================================================

_TEXT_FIELDS = ("name", "email", "url", "username", "avatar")


class ContributorRecord(BaseModel):
    """
    One contribution-attribution record.

    Example:
      name = "Alice Smith"
      email = "12345+alice@users.noreply.github.com"
      url = "https://github.com/alice"
      username = None  # resolved later from url/email
      commits = 3
    """
    model_config = ConfigDict(extra="allow")

    name: str = ""  # Display name, not unique
    email: Optional[str] = None
    url: Optional[str] = None  # Profile URL
    username: Optional[str] = None  # Explicit platform handle, if known upstream
    avatar: Optional[str] = None
    commits: Optional[int] = Field(default=None, ge=0)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "ContributorRecord":
        """
        Build a record from an untyped mapping without raising.

        Text fields that are not strings are dropped, and `commits` is kept
        only when it is a non-negative int.
        """
        data: dict[str, Any] = {}
        for key, value in payload.items():
            key = str(key)
            if key in _TEXT_FIELDS:
                if isinstance(value, str):
                    data[key] = value
            elif key == "commits":
                if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
                    data[key] = value
            else:
                data[key] = value
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize into output JSON shape (absent values omitted)."""
        return self.model_dump(mode="json", exclude_none=True)
