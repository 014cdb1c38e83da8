"""Output formatting for clustering results."""
from spkmeans.output.formatter import format_assignments, format_vector, write_lines

__all__ = [
    "format_assignments",
    "format_vector",
    "write_lines",
]
