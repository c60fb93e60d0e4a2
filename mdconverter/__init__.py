"""
Markdown Converter - Numbered Outline to Markdown

Turns plain numbered-outline text into markdown: top-level numbered
headings become bold, sub-numbered lines and prose are spaced out, and
URLs, emails and domains become markdown links.
"""

from .formatting import reformat

__version__ = "1.0.0"

__all__ = ["reformat"]
