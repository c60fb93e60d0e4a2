from .linkify import linkify
from .outline import ClassifiedLine, LineKind, classify_line, classify_lines, format_line, reformat

__all__ = [
    "linkify",
    "ClassifiedLine",
    "LineKind",
    "classify_line",
    "classify_lines",
    "format_line",
    "reformat",
]
