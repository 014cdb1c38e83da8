"""Centroid recomputation."""

from typing import List, Sequence

from spkmeans.core.types import SparseVector


class UpdateStep:
    """
    Moves each center to the mean of the vectors assigned to it.

    Runs single-threaded since it mutates the centers in place. A center
    that received no vectors is left empty for the round; it is not
    reseeded and may pick members up again later.
    """

    def run(
        self,
        vectors: Sequence[SparseVector],
        assignment: Sequence[int],
        centers: List[SparseVector],
    ) -> List[int]:
        """
        Recompute centers in place.

        Args:
            vectors: Dataset vectors in dataset order
            assignment: Center index for each vector
            centers: Centers to overwrite

        Returns:
            Number of vectors assigned to each center
        """
        for center in centers:
            center.clear()

        counts = [0] * len(centers)
        for vector, cluster in zip(vectors, assignment):
            centers[cluster].add(vector)
            counts[cluster] += 1

        for center, count in zip(centers, counts):
            if count == 0:
                continue
            center.divide(count)

        return counts
