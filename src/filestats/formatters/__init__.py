"""Output formatters for filestats."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .plain_formatter import PlainFormatter
from .rich_formatter import RichFormatter
from .xml_formatter import XmlFormatter


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "plain", "rich", "json", "xml"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "plain": PlainFormatter,
        "rich": RichFormatter,
        "json": JsonFormatter,
        "xml": XmlFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "PlainFormatter",
    "RichFormatter",
    "JsonFormatter",
    "XmlFormatter",
    "get_formatter",
]
