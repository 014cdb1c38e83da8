"""Uniform random center selection."""

import logging
from typing import List, Sequence

import numpy as np

from spkmeans.core.types import SparseVector
from spkmeans.initializers.base import BaseInitializer
from spkmeans.initializers.factory import register_initializer

logger = logging.getLogger(__name__)


@register_initializer("random")
class RandomInitializer(BaseInitializer):
    """
    Picks centers uniformly at random from the dataset.

    Indices are drawn with replacement and duplicates are rejected until
    enough distinct indices have been collected. Cheaper than k-means++
    but with no guarantee on the quality of the starting point.
    """

    def select_indices(
        self,
        vectors: Sequence[SparseVector],
        num_centers: int,
        rng: np.random.Generator,
    ) -> List[int]:
        num_vectors = len(vectors)
        chosen: List[int] = []
        seen = set()
        draws = 0

        while len(chosen) < num_centers:
            idx = int(rng.integers(num_vectors))
            draws += 1
            if idx in seen:
                continue
            seen.add(idx)
            chosen.append(idx)

        logger.debug(f"Random init: {num_centers} centers after {draws} draws")
        return chosen
