"""Error handling utilities."""


class HotSheetsError(Exception):
    """Base exception for the hot sheets backend."""
    pass


class SupabaseError(HotSheetsError):
    """Supabase operation error."""
    pass


class SearchError(HotSheetsError):
    """Listings search failed (distinct from a search with no results)."""
    pass


class DispatchError(HotSheetsError):
    """Email job enqueue failed; the notification batch was aborted."""
    pass


class InvalidTransitionError(HotSheetsError):
    """Listing status change not allowed."""
    pass
