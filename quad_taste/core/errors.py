"""Exception hierarchy for quad-taste."""


class QuadTasteError(Exception):
    """Base exception for all quad-taste errors."""
    pass


class CatalogError(QuadTasteError):
    """Raised when a quad catalog is malformed."""
    pass


class QuadNotFoundError(QuadTasteError, KeyError):
    """Raised when a quad id is not in the library."""

    def __init__(self, quad_id: str):
        self.quad_id = quad_id
        super().__init__(f"Quad not found: {quad_id}")

    def __str__(self):
        return f"Quad not found: {self.quad_id}"


class StyleCodeError(QuadTasteError, ValueError):
    """Raised when an image reference carries no parseable style codes."""
    pass


class InvalidSelectionError(QuadTasteError, ValueError):
    """Raised when selection indices are out of range or repeated."""
    pass


class SessionNotFoundError(QuadTasteError):
    """Raised when a session id is unknown to the store."""
    pass


class SessionCompletedError(QuadTasteError):
    """Raised when writing selections to a completed session."""
    pass


class ProfileNotFoundError(QuadTasteError):
    """Raised when a session has no saved profile yet."""
    pass


class PersistenceError(QuadTasteError):
    """Raised when the store fails to commit a write."""
    pass
