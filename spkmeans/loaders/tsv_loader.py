"""Tab-separated record loader."""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from spkmeans.core.types import LabeledVector, SparseVector
from spkmeans.loaders.base import BaseLoader, FeatureIndex, LoadResult, SkippedRecord
from spkmeans.loaders.exceptions import RecordFormatError

logger = logging.getLogger(__name__)


class TSVLoader(BaseLoader):
    """
    Loads records of the form ``label<TAB>feature<TAB>weight...``.

    Feature names are mapped to integer ids shared by every record in
    the file. Zero weights are dropped; if a feature repeats within a
    record, its first non-zero weight is kept. Malformed records are
    skipped and reported rather than aborting the load.

    Attributes:
        delimiter: Field separator (default: tab)
        dedupe_labels: Keep only the last vector seen for a repeated label
        encoding: File encoding
    """

    def __init__(
        self,
        delimiter: str = "\t",
        dedupe_labels: bool = True,
        encoding: str = "utf-8",
    ):
        self.delimiter = delimiter
        self.dedupe_labels = dedupe_labels
        self.encoding = encoding

    def supported_extensions(self) -> List[str]:
        return [".tsv", ".txt"]

    def load(self, file_path: Path) -> LoadResult:
        """
        Load a record file.

        Args:
            file_path: Path to the file

        Returns:
            LoadResult with records in file order

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Data file not found: {file_path}")

        with open(file_path, "r", encoding=self.encoding) as f:
            result = self.load_lines(f)

        logger.info(
            f"Loaded {len(result.records)} records ({len(result.features)} features) "
            f"from {file_path}, skipped {len(result.skipped)}"
        )
        return result

    def load_lines(
        self,
        lines: Iterable[str],
        features: Optional[FeatureIndex] = None,
    ) -> LoadResult:
        """Parse records from an iterable of lines."""
        features = features if features is not None else FeatureIndex()
        records: List[LabeledVector] = []
        positions: Dict[str, int] = {}
        skipped: List[SkippedRecord] = []

        for line_number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue

            try:
                record = self.parse_line(line, features, line_number)
            except RecordFormatError as e:
                logger.warning(f"Skipping malformed record: {e}")
                skipped.append(SkippedRecord(line_number, str(e), line))
                continue

            if not record.label:
                logger.debug(f"Skipping record without label at line {line_number}")
                skipped.append(SkippedRecord(line_number, "empty label", line))
                continue
            if not record.vector:
                logger.debug(f"Skipping record without weights: {record.label}")
                skipped.append(SkippedRecord(line_number, "no non-zero weights", line))
                continue

            if self.dedupe_labels and record.label in positions:
                logger.debug(f"Label {record.label} repeated at line {line_number}, keeping the later vector")
                records[positions[record.label]] = record
                continue

            positions[record.label] = len(records)
            records.append(record)

        return LoadResult(records=records, features=features, skipped=skipped)

    def parse_line(
        self,
        line: str,
        features: FeatureIndex,
        line_number: Optional[int] = None,
    ) -> LabeledVector:
        """
        Parse a single record.

        Raises:
            RecordFormatError: If the field count is wrong or a weight is not a number
        """
        fields = line.split(self.delimiter)
        if len(fields) % 2 != 1:
            raise RecordFormatError(
                f"expected label followed by feature/weight pairs, got {len(fields)} fields",
                line_number=line_number,
                line=line,
            )

        weights: Dict[int, float] = {}
        for i in range(1, len(fields), 2):
            name, raw_weight = fields[i], fields[i + 1]
            try:
                weight = float(raw_weight)
            except ValueError as e:
                raise RecordFormatError(
                    f"invalid weight {raw_weight!r} for feature {name!r}",
                    line_number=line_number,
                    line=line,
                ) from e
            feature_id = features.id_for(name)
            if weight != 0 and feature_id not in weights:
                weights[feature_id] = weight

        return LabeledVector(label=fields[0], vector=SparseVector(weights))
