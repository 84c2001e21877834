"""Application configuration read from environment variables."""

import os


class AppConfig:
    """Centralized application configuration."""

    SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
    SUPABASE_SERVICE_ROLE_KEY = os.environ.get("SUPABASE_SERVICE_ROLE_KEY", "")
    EMAIL_PROVIDER = os.environ.get("EMAIL_PROVIDER", "resend")
    APP_BASE_URL = os.environ.get("APP_BASE_URL", "https://allagentconnect.com").rstrip("/")
    EMAIL_MAX_ATTEMPTS = int(os.environ.get("EMAIL_MAX_ATTEMPTS", "5"))
    SEARCH_RESULT_LIMIT = int(os.environ.get("SEARCH_RESULT_LIMIT", "200"))

    @classmethod
    def listing_url(cls, listing_id: str) -> str:
        """Public detail page for a listing."""
        return f"{cls.APP_BASE_URL}/property/{listing_id}"

    @classmethod
    def hot_sheet_review_url(cls, hot_sheet_id: str) -> str:
        """Review page for a hot sheet's matches."""
        return f"{cls.APP_BASE_URL}/hot-sheets/{hot_sheet_id}/review"
