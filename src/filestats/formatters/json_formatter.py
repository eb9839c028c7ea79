"""JSON formatter for filestats."""

import json

from ..api import ScanResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the table as a JSON document."""

    file_extension = "json"

    def format(self, result: ScanResult) -> str:
        return json.dumps(result.to_dict(), indent=2) + "\n"
