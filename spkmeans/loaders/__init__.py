"""Record loaders module - turn data files into labeled sparse vectors."""
from spkmeans.loaders.base import (
    BaseLoader,
    FeatureIndex,
    LoadResult,
    SkippedRecord,
)
from spkmeans.loaders.exceptions import LoaderError, RecordFormatError
from spkmeans.loaders.tsv_loader import TSVLoader

__all__ = [
    "BaseLoader",
    "FeatureIndex",
    "LoadResult",
    "SkippedRecord",
    "LoaderError",
    "RecordFormatError",
    "TSVLoader",
]
