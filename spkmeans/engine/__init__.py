"""Clustering engine - assignment, update and the convergence loop."""
from spkmeans.engine.assignment import AssignmentStep, nearest_center
from spkmeans.engine.update import UpdateStep
from spkmeans.engine.engine import ClusterEngine, ClusterResult, EngineState

__all__ = [
    "AssignmentStep",
    "nearest_center",
    "UpdateStep",
    "ClusterEngine",
    "ClusterResult",
    "EngineState",
]
