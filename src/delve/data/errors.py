"""Custom exceptions for the storage layer."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a backing store exists but cannot be read."""
