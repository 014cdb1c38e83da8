"""Tests for the centroid update step."""

import pytest

from spkmeans.core.types import SparseVector
from spkmeans.engine.update import UpdateStep


class TestUpdateStep:
    """Tests for UpdateStep."""

    def test_center_is_coordinate_mean(self):
        # Arrange
        vectors = [
            SparseVector({0: 1.0, 1: 2.0}),
            SparseVector({0: 3.0}),
            SparseVector({2: 5.0}),
        ]
        centers = [SparseVector({9: 9.0}), SparseVector({9: 9.0})]

        # Act
        counts = UpdateStep().run(vectors, [0, 0, 1], centers)

        # Assert
        assert counts == [2, 1]
        assert centers[0].to_dict() == pytest.approx({0: 2.0, 1: 1.0})
        assert centers[1].to_dict() == pytest.approx({2: 5.0})

    def test_absent_coordinates_stay_absent(self):
        """Old center coordinates are cleared before accumulation."""
        vectors = [SparseVector({0: 1.0}), SparseVector({0: 3.0})]
        centers = [SparseVector({7: 4.0, 0: 100.0})]

        UpdateStep().run(vectors, [0, 0], centers)

        assert set(centers[0].indices) == {0}
        assert centers[0][0] == pytest.approx(2.0)

    def test_dead_center_left_empty(self):
        """A center with no members becomes the empty vector."""
        vectors = [SparseVector({0: 1.0}), SparseVector({0: 2.0})]
        centers = [SparseVector({0: 1.0}), SparseVector({0: 50.0})]

        counts = UpdateStep().run(vectors, [0, 0], centers)

        assert counts == [2, 0]
        assert len(centers[1]) == 0
        assert centers[0][0] == pytest.approx(1.5)

    def test_centers_updated_in_place(self):
        vectors = [SparseVector({0: 4.0})]
        center = SparseVector({0: 1.0})
        centers = [center]

        UpdateStep().run(vectors, [0], centers)

        assert centers[0] is center
        assert center[0] == pytest.approx(4.0)

    def test_does_not_mutate_dataset(self):
        vectors = [SparseVector({0: 1.0}), SparseVector({0: 3.0, 1: 1.0})]
        before = [v.to_dict() for v in vectors]

        UpdateStep().run(vectors, [0, 0], [SparseVector()])

        assert [v.to_dict() for v in vectors] == before

    def test_mean_over_exact_members(self):
        """Each coordinate averages over every member, counting absences as zero."""
        vectors = [
            SparseVector({0: 2.0, 1: 4.0}),
            SparseVector({0: 4.0}),
            SparseVector({1: 8.0}),
            SparseVector({0: 100.0}),
        ]
        centers = [SparseVector(), SparseVector()]

        UpdateStep().run(vectors, [0, 0, 0, 1], centers)

        assert centers[0].to_dict() == pytest.approx({0: 2.0, 1: 4.0})
        assert centers[1].to_dict() == pytest.approx({0: 100.0})
