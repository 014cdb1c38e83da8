"""Plain-text output for cluster assignments and loaded vectors."""

from typing import IO, Iterable, Iterator, Optional, Tuple

from spkmeans.core.types import SparseVector
from spkmeans.loaders.base import FeatureIndex

DELIMITER = "\t"


def format_assignments(pairs: Iterable[Tuple[str, int]]) -> Iterator[str]:
    """Yield ``label<TAB>cluster`` lines in the order given."""
    for label, cluster in pairs:
        yield f"{label}{DELIMITER}{cluster}"


def format_vector(
    label: str,
    vector: SparseVector,
    features: Optional[FeatureIndex] = None,
) -> str:
    """
    Render one record as ``label<TAB>feature<TAB>weight...``.

    Features are written by name when a FeatureIndex is given, otherwise
    by id. Weights use three decimals.
    """
    parts = [label]
    for feature_id, weight in vector.items():
        key = features.name_of(feature_id) if features is not None else str(feature_id)
        parts.append(key)
        parts.append(f"{weight:.3f}")
    return DELIMITER.join(parts)


def write_lines(lines: Iterable[str], stream: IO[str]) -> int:
    """Write lines to a text stream; returns the number written."""
    count = 0
    for line in lines:
        stream.write(line + "\n")
        count += 1
    return count
