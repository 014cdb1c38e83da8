"""Shared types used across modules."""
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Tuple, Union


@dataclass
class SparseVector:
    """
    Sparse vector representation.

    Only non-zero coordinates are stored, so distance and accumulation
    cost depends on the number of stored entries rather than on the size
    of the feature space.

    Attributes:
        weights: Mapping of feature id to non-zero weight
    """
    weights: Dict[int, float] = field(default_factory=dict)

    def __post_init__(self):
        self.weights = {
            int(key): float(value)
            for key, value in self.weights.items()
            if value != 0
        }

    @property
    def indices(self) -> List[int]:
        """Feature ids with non-zero weights."""
        return list(self.weights.keys())

    @property
    def values(self) -> List[float]:
        """Weight for each feature id, in the same order as indices."""
        return list(self.weights.values())

    def to_dict(self) -> Dict[int, float]:
        """Convert to {feature_id: weight} dict."""
        return dict(self.weights)

    def copy(self) -> "SparseVector":
        """Independent copy; mutating it leaves this vector untouched."""
        return SparseVector(dict(self.weights))

    def get(self, feature_id: int, default: float = 0.0) -> float:
        return self.weights.get(feature_id, default)

    def items(self):
        return self.weights.items()

    def squared_distance(self, other: "SparseVector") -> float:
        """
        Squared Euclidean distance to another sparse vector.

        Walks the smaller vector with lookups into the larger one, then
        walks the larger vector skipping ids already covered, so every id
        in the union is counted exactly once.

        Args:
            other: Vector to measure against

        Returns:
            Sum of squared coordinate differences (>= 0)
        """
        small, large = self.weights, other.weights
        if len(small) > len(large):
            small, large = large, small

        dist = 0.0
        for key, value in small.items():
            diff = value - large.get(key, 0.0)
            dist += diff * diff
        for key, value in large.items():
            if key in small:
                continue
            dist += value * value
        return dist

    def add(self, other: "SparseVector") -> None:
        """Accumulate another vector into this one in place."""
        weights = self.weights
        for key, value in other.weights.items():
            weights[key] = weights.get(key, 0.0) + value

    def divide(self, divisor: float) -> None:
        """Divide every stored weight in place, dropping entries that cancel to zero."""
        self.weights = {
            key: value / divisor
            for key, value in self.weights.items()
            if value != 0
        }

    def clear(self) -> None:
        self.weights.clear()

    def __len__(self) -> int:
        return len(self.weights)

    def __iter__(self) -> Iterator[int]:
        return iter(self.weights)

    def __contains__(self, feature_id: int) -> bool:
        return feature_id in self.weights

    def __getitem__(self, feature_id: int) -> float:
        return self.weights.get(feature_id, 0.0)

    def __repr__(self) -> str:
        return f"SparseVector(nnz={len(self.weights)})"


def squared_distance(a: SparseVector, b: SparseVector) -> float:
    """Squared Euclidean distance between two sparse vectors."""
    return a.squared_distance(b)


@dataclass
class LabeledVector:
    """
    A dataset entry.

    Attributes:
        label: Record label as read from the input
        vector: The record's feature weights
    """
    label: str
    vector: SparseVector

    def __repr__(self) -> str:
        return f"LabeledVector(label='{self.label}', nnz={len(self.vector)})"


Dataset = List[LabeledVector]
Assignment = List[int]


def as_labeled_vectors(
    records: Iterable[Union[LabeledVector, Tuple[str, SparseVector]]],
) -> Dataset:
    """Normalize LabeledVector entries and (label, vector) pairs into a dataset."""
    return [
        record if isinstance(record, LabeledVector) else LabeledVector(*record)
        for record in records
    ]
