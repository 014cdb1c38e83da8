"""Abstract base class for center initializers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from spkmeans.core.exceptions import ClusteringConfigError
from spkmeans.core.types import SparseVector


@dataclass
class InitialCenters:
    """
    Centers chosen at the start of a run.

    Attributes:
        indices: Dataset index each center was copied from
        centers: Independent copies of the chosen dataset vectors
    """
    indices: List[int]
    centers: List[SparseVector]

    def __len__(self) -> int:
        return len(self.centers)


class BaseInitializer(ABC):
    """
    Abstract base class that all center initializers must implement.

    Ensures consistent interface across:
    - Uniform random sampling
    - k-means++ weighted sampling
    """

    name: str = "base"

    @abstractmethod
    def select_indices(
        self,
        vectors: Sequence[SparseVector],
        num_centers: int,
        rng: np.random.Generator,
    ) -> List[int]:
        """
        Pick which dataset vectors become the initial centers.

        Args:
            vectors: Dataset vectors in dataset order
            num_centers: Number of distinct indices to return
            rng: Random generator owned by the caller

        Returns:
            num_centers distinct dataset indices
        """
        pass

    def initialize(
        self,
        vectors: Sequence[SparseVector],
        num_centers: int,
        rng: np.random.Generator,
    ) -> InitialCenters:
        """
        Choose initial centers and copy them out of the dataset.

        Raises:
            ClusteringConfigError: If num_centers is not in 1..len(vectors)
        """
        if num_centers <= 0 or num_centers > len(vectors):
            raise ClusteringConfigError(
                f"Cannot choose {num_centers} centers from {len(vectors)} vectors"
            )

        indices = self.select_indices(vectors, num_centers, rng)
        centers = [vectors[idx].copy() for idx in indices]
        return InitialCenters(indices=indices, centers=centers)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
