"""Custom exceptions for the clustering engine."""


class ClusteringError(Exception):
    """Base class for clustering failures."""
    pass


class ClusteringConfigError(ClusteringError, ValueError):
    """Raised when the requested clustering cannot be run on the given dataset."""
    pass
