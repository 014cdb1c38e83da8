"""Nearest-center assignment, parallel over dataset vectors."""

import logging
import math
import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from spkmeans.core.types import Assignment, SparseVector

logger = logging.getLogger(__name__)


def nearest_center(vector: SparseVector, centers: Sequence[SparseVector]) -> int:
    """
    Index of the center closest to vector.

    Ties go to the lowest index: a later center must be strictly closer
    to replace the running minimum.
    """
    min_idx = 0
    min_dist = math.inf
    for idx, center in enumerate(centers):
        dist = vector.squared_distance(center)
        if dist < min_dist:
            min_idx = idx
            min_dist = dist
    return min_idx


class AssignmentStep:
    """
    Assigns every dataset vector to its nearest center.

    The index range is split into contiguous chunks, one per worker.
    Workers only read the vectors and centers and write disjoint slots of
    a preallocated list, so no locking is needed; waiting on every chunk
    is the barrier before the centers may be moved.

    Attributes:
        num_workers: Size of the thread pool (default: CPU count)
    """

    def __init__(self, num_workers: Optional[int] = None):
        self.num_workers = num_workers or os.cpu_count() or 1

    def run(
        self,
        vectors: Sequence[SparseVector],
        centers: Sequence[SparseVector],
    ) -> Assignment:
        """
        Compute a fresh assignment.

        Args:
            vectors: Dataset vectors in dataset order
            centers: Current centers; must not change during the call

        Returns:
            List where entry i is the nearest center index of vectors[i]
        """
        num_vectors = len(vectors)
        assignment: Assignment = [0] * num_vectors
        workers = min(self.num_workers, num_vectors)

        if workers <= 1:
            self._assign_range(vectors, centers, assignment, 0, num_vectors)
            return assignment

        chunk_size = -(-num_vectors // workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(
                    self._assign_range,
                    vectors,
                    centers,
                    assignment,
                    start,
                    min(start + chunk_size, num_vectors),
                )
                for start in range(0, num_vectors, chunk_size)
            ]
            for future in futures:
                future.result()

        return assignment

    @staticmethod
    def _assign_range(
        vectors: Sequence[SparseVector],
        centers: Sequence[SparseVector],
        assignment: List[int],
        start: int,
        end: int,
    ) -> None:
        for i in range(start, end):
            assignment[i] = nearest_center(vectors[i], centers)

    def __repr__(self) -> str:
        return f"AssignmentStep(num_workers={self.num_workers})"
