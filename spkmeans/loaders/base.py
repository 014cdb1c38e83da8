"""Abstract base class for record loaders."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from spkmeans.core.types import Dataset


class FeatureIndex:
    """
    Maps feature names to dense integer ids within one run.

    Ids are handed out in first-seen order starting at 0.
    """

    def __init__(self):
        self._ids: Dict[str, int] = {}
        self._names: List[str] = []

    def id_for(self, name: str) -> int:
        """Return the id for name, assigning the next free id if it is new."""
        feature_id = self._ids.get(name)
        if feature_id is None:
            feature_id = len(self._names)
            self._ids[name] = feature_id
            self._names.append(name)
        return feature_id

    def lookup(self, name: str) -> Optional[int]:
        return self._ids.get(name)

    def name_of(self, feature_id: int) -> str:
        return self._names[feature_id]

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: str) -> bool:
        return name in self._ids


@dataclass
class SkippedRecord:
    """
    A record that was not loaded.

    Attributes:
        line_number: 1-based line number in the source file
        reason: Why the record was skipped
        line: The raw line
    """
    line_number: int
    reason: str
    line: str = ""


@dataclass
class LoadResult:
    """
    Records loaded from a file.

    Attributes:
        records: Labeled vectors in file order
        features: Feature name to id mapping used for the vectors
        skipped: Records dropped while loading
    """
    records: Dataset
    features: FeatureIndex
    skipped: List[SkippedRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)


class BaseLoader(ABC):
    """
    Abstract base class that all record loaders must implement.
    """

    @abstractmethod
    def load(self, file_path: Path) -> LoadResult:
        """
        Load labeled sparse vectors from a file.

        Args:
            file_path: Path to the file

        Returns:
            LoadResult with the valid records and a report of skipped ones

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        pass

    @abstractmethod
    def supported_extensions(self) -> List[str]:
        """
        Return list of supported file extensions.

        Returns:
            List of extensions (e.g., ['.tsv'])
        """
        pass

    def can_load(self, file_path: Path) -> bool:
        """Check if this loader can handle the given file."""
        return Path(file_path).suffix.lower() in self.supported_extensions()
