"""Lloyd's k-means loop over labeled sparse vectors."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import numpy as np

from spkmeans.core.config import ClusterConfig
from spkmeans.core.exceptions import ClusteringConfigError
from spkmeans.core.types import (
    Assignment,
    Dataset,
    LabeledVector,
    SparseVector,
    as_labeled_vectors,
)
from spkmeans.engine.assignment import AssignmentStep
from spkmeans.engine.update import UpdateStep
from spkmeans.initializers import BaseInitializer, InitializerFactory

logger = logging.getLogger(__name__)


class EngineState(str, Enum):
    """Where a clustering run is in its lifecycle."""
    INITIALIZING = "initializing"
    ITERATING = "iterating"
    CONVERGED = "converged"
    ITERATION_LIMIT_REACHED = "iteration_limit_reached"

    @property
    def is_terminal(self) -> bool:
        return self in (EngineState.CONVERGED, EngineState.ITERATION_LIMIT_REACHED)


@dataclass
class ClusterResult:
    """
    Outcome of a clustering run.

    Attributes:
        labels: Dataset labels in dataset order
        assignment: Cluster index for each dataset entry
        state: Terminal state reached (converged or iteration limit)
        iterations: Number of assign/update rounds performed
        centers: Final centers
        initial_indices: Dataset indices the centers were seeded from
        dead_centers: Centers left with no members after the last round
    """
    labels: List[str]
    assignment: Assignment
    state: EngineState
    iterations: int
    centers: List[SparseVector]
    initial_indices: List[int] = field(default_factory=list)
    dead_centers: List[int] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return self.state == EngineState.CONVERGED

    def pairs(self) -> List[Tuple[str, int]]:
        """(label, cluster index) for every dataset entry, in dataset order."""
        return list(zip(self.labels, self.assignment))

    def cluster_sizes(self) -> Dict[int, int]:
        """Member count per center, including empty centers."""
        counts = Counter(self.assignment)
        return {idx: counts.get(idx, 0) for idx in range(len(self.centers))}

    def __repr__(self) -> str:
        return (
            f"ClusterResult(state={self.state.value}, iterations={self.iterations}, "
            f"k={len(self.centers)}, n={len(self.assignment)})"
        )


class ClusterEngine:
    """
    Runs k-means over an in-memory dataset.

    The run moves through INITIALIZING (seed centers once) and ITERATING
    (assign, then update) until the assignment stops changing (CONVERGED)
    or the iteration cap is hit (ITERATION_LIMIT_REACHED).

    Usage:
        engine = ClusterEngine(ClusterConfig(num_clusters=2))
        engine.add_vector("doc-1", SparseVector({0: 1.0}))
        ...
        result = engine.run()
        for label, cluster in result.pairs():
            ...
    """

    def __init__(
        self,
        config: ClusterConfig,
        initializer: Optional[BaseInitializer] = None,
    ):
        """
        Initialize engine.

        Args:
            config: Run settings
            initializer: Seeding strategy; built from config.initializer if omitted

        Raises:
            ClusteringConfigError: If the initializer name is not registered
        """
        self.config = config

        if initializer is None:
            try:
                initializer = InitializerFactory.create(config.initializer)
            except ValueError as e:
                raise ClusteringConfigError(str(e)) from e
        self.initializer = initializer

        self.assignment_step = AssignmentStep(num_workers=config.num_workers)
        self.update_step = UpdateStep()

        self._dataset: Dataset = []
        self._centers: List[SparseVector] = []
        self._assignment: Optional[Assignment] = None
        self._state: Optional[EngineState] = None
        self._result: Optional[ClusterResult] = None

        logger.info(
            f"Initialized ClusterEngine: k={config.num_clusters}, "
            f"initializer={self.initializer.name}, max_iterations={config.max_iterations}"
        )

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ClusterEngine":
        """Create engine from a config dict (e.g. the 'clustering' section)."""
        return cls(ClusterConfig.from_dict(config))

    def add_vector(self, label: str, vector: SparseVector) -> int:
        """
        Append a dataset entry.

        Returns:
            Dataset index of the new entry
        """
        self._dataset.append(LabeledVector(label=label, vector=vector))
        return len(self._dataset) - 1

    def add_vectors(
        self,
        records: Iterable[Union[LabeledVector, Tuple[str, SparseVector]]],
    ) -> int:
        """Append many entries; returns how many were added."""
        entries = as_labeled_vectors(records)
        self._dataset.extend(entries)
        added = len(entries)
        logger.debug(f"Added {added} vectors, dataset size {len(self._dataset)}")
        return added

    @property
    def dataset(self) -> Dataset:
        return list(self._dataset)

    @property
    def centers(self) -> List[SparseVector]:
        return self._centers

    @property
    def state(self) -> Optional[EngineState]:
        return self._state

    @property
    def assignment(self) -> Optional[Assignment]:
        return self._assignment

    @property
    def result(self) -> Optional[ClusterResult]:
        return self._result

    def run(self) -> ClusterResult:
        """
        Cluster the current dataset.

        Returns:
            ClusterResult with the final assignment and terminal state

        Raises:
            ClusteringConfigError: If the config does not fit the dataset;
                raised before any center is chosen
        """
        config = self.config
        config.validate(len(self._dataset))

        num_clusters = config.num_clusters
        vectors = [entry.vector for entry in self._dataset]
        labels = [entry.label for entry in self._dataset]

        self._state = EngineState.INITIALIZING
        self._result = None
        rng = np.random.default_rng(config.seed)
        initial = self.initializer.initialize(vectors, num_clusters, rng)
        self._centers = initial.centers
        logger.info(
            f"Seeded {num_clusters} centers with {self.initializer.name} "
            f"from {len(vectors)} vectors"
        )

        # out-of-range index: can never equal a real assignment
        previous: Assignment = [num_clusters] * len(vectors)
        iteration = 0
        counts: List[int] = []
        self._state = EngineState.ITERATING

        while True:
            iteration += 1
            assignment = self.assignment_step.run(vectors, self._centers)
            counts = self.update_step.run(vectors, assignment, self._centers)
            self._assignment = assignment

            changed = sum(1 for cur, prev in zip(assignment, previous) if cur != prev)
            logger.debug(f"k-means iteration {iteration}: {changed} vectors reassigned")

            dead = [idx for idx, count in enumerate(counts) if count == 0]
            if dead:
                logger.debug(f"Iteration {iteration}: dead centers {dead}")

            if assignment == previous:
                self._state = EngineState.CONVERGED
                break
            if iteration >= config.max_iterations:
                self._state = EngineState.ITERATION_LIMIT_REACHED
                break
            previous = assignment

        dead_centers = [idx for idx, count in enumerate(counts) if count == 0]
        if dead_centers:
            logger.warning(f"{len(dead_centers)} of {num_clusters} centers ended with no members")

        if self._state == EngineState.CONVERGED:
            logger.info(f"Converged after {iteration} iterations")
        else:
            logger.info(f"Stopped at iteration limit ({config.max_iterations}) without converging")

        self._result = ClusterResult(
            labels=labels,
            assignment=self._assignment,
            state=self._state,
            iterations=iteration,
            centers=self._centers,
            initial_indices=initial.indices,
            dead_centers=dead_centers,
        )
        return self._result

    def __len__(self) -> int:
        return len(self._dataset)

    def __repr__(self) -> str:
        state = self._state.value if self._state else "idle"
        return f"ClusterEngine(k={self.config.num_clusters}, n={len(self._dataset)}, state={state})"
