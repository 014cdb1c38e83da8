"""Custom exceptions for record loaders."""

from typing import Optional


class LoaderError(Exception):
    """Raised when a data file cannot be loaded or parsed."""
    pass


class RecordFormatError(LoaderError):
    """Raised for a single record that does not follow the record format."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: str = ""):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
