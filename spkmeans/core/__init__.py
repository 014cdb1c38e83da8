"""Core types, configuration and exceptions."""
from spkmeans.core.types import (
    SparseVector,
    LabeledVector,
    Dataset,
    Assignment,
    squared_distance,
    as_labeled_vectors,
)
from spkmeans.core.exceptions import ClusteringError, ClusteringConfigError
from spkmeans.core.config import ClusterConfig, Config

__all__ = [
    "SparseVector",
    "LabeledVector",
    "Dataset",
    "Assignment",
    "squared_distance",
    "as_labeled_vectors",
    "ClusteringError",
    "ClusteringConfigError",
    "ClusterConfig",
    "Config",
]
