"""Comment-line rules keyed by extension tag.

Adding a rule:
  1. Add a CommentRule entry to COMMENT_RULES below.
  2. That's it. FileScanner looks markers up through COMMENT_MARKERS.

Extensions without a rule never count comment lines.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommentRule:
    """A line containing ``marker`` anywhere is a comment line."""

    name: str
    extensions: tuple[str, ...]
    marker: str


COMMENT_RULES: tuple[CommentRule, ...] = (
    CommentRule(name="shell", extensions=("SH", "BASH"), marker="#"),
    CommentRule(name="java", extensions=("JAVA",), marker="//"),
)

COMMENT_MARKERS: dict[str, str] = {
    ext: rule.marker for rule in COMMENT_RULES for ext in rule.extensions
}


def comment_marker(extension: str):
    """Return the comment marker for an extension tag, or None."""
    return COMMENT_MARKERS.get(extension)
