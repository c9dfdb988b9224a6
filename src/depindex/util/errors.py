"""Application-level error types."""


class DepIndexError(Exception):
    """Base error for depindex."""


class GraphFileError(DepIndexError):
    """Raised when a graph file cannot be read or fails validation."""
