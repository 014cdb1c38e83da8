"""spkmeans - parallel k-means / k-means++ clustering of sparse vectors."""
from spkmeans.core import (
    SparseVector,
    LabeledVector,
    ClusterConfig,
    ClusteringConfigError,
    squared_distance,
)
from spkmeans.engine import ClusterEngine, ClusterResult, EngineState
from spkmeans.initializers import InitializerFactory

__version__ = "0.1.0"

__all__ = [
    "SparseVector",
    "LabeledVector",
    "ClusterConfig",
    "ClusteringConfigError",
    "squared_distance",
    "ClusterEngine",
    "ClusterResult",
    "EngineState",
    "InitializerFactory",
]
