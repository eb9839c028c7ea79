"""XML formatter for filestats."""

import xml.etree.ElementTree as ET

from ..api import ScanResult
from .base import BaseFormatter


class XmlFormatter(BaseFormatter):
    """Render the table as a ``<recordsList>`` document."""

    file_extension = "xml"

    def format(self, result: ScanResult) -> str:
        root = ET.Element("recordsList")
        for record in result.records.values():
            node = ET.SubElement(root, "typeRecord")
            for key, value in record.to_dict().items():
                ET.SubElement(node, key).text = str(value)
        ET.indent(root)
        body = ET.tostring(root, encoding="unicode")
        return f'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n{body}\n'
