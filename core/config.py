"""
Identity-resolution constants for contributor-resolver.

These settings describe the one hosting platform whose identity formats
are understood (profile URLs, app URLs, no-reply commit emails). Other
hosts are never matched.
"""

from core.models import DisplayMode


class ResolutionConfig:
    """
    Immutable resolution settings.

    Changing PROFILE_HOST also changes the accepted no-reply email domain.
    """

    # ========================================================================
    # Profile URLs
    # ========================================================================

    PROFILE_HOST: str = "github.com"
    """Canonical profile-hosting domain. Subdomains are accepted too."""

    APP_PATH_SEGMENT: str = "apps"
    """First path segment of application/integration account URLs (/apps/{name})."""

    BOT_MARKER: str = "[bot]"
    """Suffix appended to app account handles."""

    # ========================================================================
    # Commit emails
    # ========================================================================

    NOREPLY_EMAIL_DOMAIN: str = f"users.noreply.{PROFILE_HOST}"
    """Domain of platform-issued no-reply commit emails."""

    ACCOUNT_ID_SEPARATOR: str = "+"
    """Separates the numeric account id from the handle ({id}+{handle})."""

    # ========================================================================
    # Grouping keys
    # ========================================================================

    ANONYMOUS_KEY_PREFIX: str = "anonymous-"
    """Prefix of the positional key used for records with no identity signal."""

    # ========================================================================
    # Display
    # ========================================================================

    DEFAULT_MODE: DisplayMode = DisplayMode.INLINE
    """Mode used when the site option is unset or malformed."""

    @classmethod
    def validate(cls) -> None:
        """
        Validate configuration at startup.

        Raises:
            ValueError: If any constant is inconsistent.
        """
        if not cls.PROFILE_HOST or cls.PROFILE_HOST.startswith("."):
            raise ValueError("PROFILE_HOST must be a bare domain")

        if not cls.NOREPLY_EMAIL_DOMAIN.endswith(cls.PROFILE_HOST):
            raise ValueError("NOREPLY_EMAIL_DOMAIN must belong to PROFILE_HOST")

        if not cls.APP_PATH_SEGMENT or "/" in cls.APP_PATH_SEGMENT:
            raise ValueError("APP_PATH_SEGMENT must be a single path segment")

        if not cls.BOT_MARKER:
            raise ValueError("BOT_MARKER must be non-empty")

        if len(cls.ACCOUNT_ID_SEPARATOR) != 1:
            raise ValueError("ACCOUNT_ID_SEPARATOR must be one character")

        if not cls.ANONYMOUS_KEY_PREFIX:
            raise ValueError("ANONYMOUS_KEY_PREFIX must be non-empty")


# Validate at module import time
ResolutionConfig.validate()
