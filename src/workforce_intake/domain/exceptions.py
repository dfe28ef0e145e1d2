"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Persistence failures are classified under StorageError so the custom-entry
store can pick a recovery path (update, local cache, empty list) without
knowing which backend raised them.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class StorageError(DomainException):
    """Base class for persistence failures."""


class StoreUnavailableError(StorageError):
    """The backing store could not be reached or refused the operation."""


class DuplicateEntryError(StorageError):
    """A write hit the one-entry-per-user-and-name constraint."""


class CacheCorruptedError(StorageError):
    """Locally cached data could not be parsed."""
