from __future__ import annotations


class StashError(Exception):
    """Base error for stashgrid domain exceptions."""


class PlacementConflict(StashError):
    """Raised when a position violates grid bounds or overlaps another item."""


class NotFound(StashError):
    """Raised when an operation references an item id that is not in the store."""


class DuplicateItem(StashError):
    """Raised when adding an item whose id is already present."""


class NoSpaceAvailable(StashError):
    """Raised when no free cell can hold a newly spawned item."""


class ItemValidationError(StashError, ValueError):
    """Raised when an item or one of its parts is malformed."""


class PersistenceError(StashError):
    """Base exception for storage backend failures."""


class PersistenceUnavailable(PersistenceError):
    """Raised when a storage backend is missing or cannot be reached."""


class PersistenceCorrupt(PersistenceError):
    """Raised when stored content cannot be parsed into an item set."""
