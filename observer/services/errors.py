class ObserverError(Exception):
    pass


class ConnectionFailure(ObserverError):
    """The database could not be configured or reached at startup."""


class ValidationFailure(ObserverError, ValueError):
    """A request lacks a field the operation requires."""


class NotFound(ObserverError, LookupError):
    pass


class StoreFailure(ObserverError, RuntimeError):
    """The underlying store rejected or failed an operation."""


class InsertFailure(StoreFailure):
    pass


class DuplicateRecord(InsertFailure):
    """A unique constraint rejected the insert."""


class ExhaustedRetries(StoreFailure):
    pass
