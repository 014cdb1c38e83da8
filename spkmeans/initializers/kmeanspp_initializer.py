"""k-means++ center selection (Arthur & Vassilvitskii, 2007)."""

import logging
from typing import List, Sequence

import numpy as np

from spkmeans.core.types import SparseVector
from spkmeans.initializers.base import BaseInitializer
from spkmeans.initializers.factory import register_initializer

logger = logging.getLogger(__name__)


def index_for_draw(weights: np.ndarray, draw: float) -> int:
    """
    Inverse-CDF lookup over non-negative weights.

    Returns the first index whose cumulative weight reaches ``draw``.
    A draw landing exactly on a boundary resolves to the lower index.
    """
    prefix = np.cumsum(weights)
    idx = int(np.searchsorted(prefix, draw, side="left"))
    if idx < len(prefix):
        return idx
    # draw past the total: take the last point that can still be picked
    positive = np.flatnonzero(weights > 0)
    return int(positive[-1]) if len(positive) else len(prefix) - 1


def _potential(closest_dist: np.ndarray) -> float:
    """Total of the sampling weights, summed the same way index_for_draw sums them."""
    return float(np.cumsum(closest_dist)[-1])


@register_initializer("kmeans++")
class KMeansPlusPlusInitializer(BaseInitializer):
    """
    Seeds centers with probability proportional to squared distance.

    The first center is uniform. Every later center is drawn with
    probability closest_dist[i] / potential, where closest_dist[i] is the
    squared distance from point i to its nearest chosen center and the
    potential is the sum of closest_dist. Points already chosen have
    weight zero, so an index is never picked twice.
    """

    def select_indices(
        self,
        vectors: Sequence[SparseVector],
        num_centers: int,
        rng: np.random.Generator,
    ) -> List[int]:
        num_vectors = len(vectors)

        first = int(rng.integers(num_vectors))
        chosen = [first]
        closest_dist = np.array(
            [vec.squared_distance(vectors[first]) for vec in vectors],
            dtype=np.float64,
        )
        closest_dist[first] = 0.0
        potential = _potential(closest_dist)

        while len(chosen) < num_centers:
            if potential > 0.0:
                # (0, potential] so the lookup never lands on a zero weight
                draw = (1.0 - rng.random()) * potential
                idx = index_for_draw(closest_dist, draw)
            else:
                # every remaining point coincides with a chosen center
                remaining = np.setdiff1d(np.arange(num_vectors), chosen)
                idx = int(rng.choice(remaining))
                logger.debug("Potential is zero, falling back to a uniform draw")

            chosen.append(idx)
            center = vectors[idx]
            dist = np.array(
                [vec.squared_distance(center) for vec in vectors],
                dtype=np.float64,
            )
            np.minimum(closest_dist, dist, out=closest_dist)
            closest_dist[idx] = 0.0
            potential = _potential(closest_dist)

        logger.debug(f"k-means++ init: {num_centers} centers, final potential {potential:.4f}")
        return chosen
