"""Tests for output formatting."""

import io

from spkmeans.core.types import SparseVector
from spkmeans.loaders import FeatureIndex
from spkmeans.output import format_assignments, format_vector, write_lines


class TestFormatter:
    """Tests for the plain-text formatter."""

    def test_format_assignments(self):
        lines = list(format_assignments([("doc1", 0), ("doc2", 3)]))
        assert lines == ["doc1\t0", "doc2\t3"]

    def test_format_vector_by_id(self):
        line = format_vector("doc", SparseVector({4: 1.0, 2: 0.12345}))
        assert line == "doc\t4\t1.000\t2\t0.123"

    def test_format_vector_by_name(self):
        features = FeatureIndex()
        red = features.id_for("red")
        line = format_vector("doc", SparseVector({red: 2.5}), features)
        assert line == "doc\tred\t2.500"

    def test_write_lines(self):
        stream = io.StringIO()
        count = write_lines(["a\t0", "b\t1"], stream)
        assert count == 2
        assert stream.getvalue() == "a\t0\nb\t1\n"
