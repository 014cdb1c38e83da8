"""Center initializers module - pluggable seeding strategies."""

# Import base and factory first (defines registry and decorator)
from spkmeans.initializers.base import BaseInitializer, InitialCenters
from spkmeans.initializers.factory import (
    InitializerFactory,
    register_initializer,
    get_registered_initializers,
)

# Import initializers to trigger registration
from spkmeans.initializers.random_initializer import RandomInitializer
from spkmeans.initializers.kmeanspp_initializer import (
    KMeansPlusPlusInitializer,
    index_for_draw,
)

__all__ = [
    "BaseInitializer",
    "InitialCenters",
    "InitializerFactory",
    "register_initializer",
    "get_registered_initializers",
    "RandomInitializer",
    "KMeansPlusPlusInitializer",
    "index_for_draw",
]
