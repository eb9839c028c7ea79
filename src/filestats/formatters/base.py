"""Base formatter interface for filestats output rendering."""

from abc import ABC, abstractmethod

from ..api import ScanResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    # Suffix used when the report is written next to the scanned tree
    file_extension = "txt"

    @abstractmethod
    def format(self, result: ScanResult) -> str:
        """Return formatted string representation of the result."""

    def render(self, result: ScanResult) -> None:
        """Print the result to stdout."""
        print(self.format(result), end="")
