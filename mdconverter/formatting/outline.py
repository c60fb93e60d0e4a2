"""
Line classification and markdown formatting for numbered outlines.

Each line is linkified, classified into a LineKind, then rendered:

    1. Introduction      ->  **1. Introduction**
    1.1 Overview         ->  (blank line) 1.1 Overview
    Some prose           ->  (blank line) Some prose

The first line is treated as a document title and bolded unless it is
itself a main heading.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from .linkify import linkify


# "2. Scope" -- integer, period, whitespace, content
MAIN_HEADING_RE = re.compile(r"^([0-9]+)\.\s+(.+)$")

# "2.1 Project goals" -- integer.integer prefix
SUB_HEADING_RE = re.compile(r"^[0-9]+\.[0-9]+")

# Any numbered line at all; prose is whatever does not start this way
NUMBERED_RE = re.compile(r"^[0-9]+\.")


class LineKind(Enum):
    """Structural role of a line in an outline."""
    TITLE = "title"
    MAIN_HEADING = "main_heading"
    SUB_HEADING = "sub_heading"
    PROSE = "prose"
    BLANK = "blank"  # blank, or numbered text matching neither heading form


@dataclass(frozen=True)
class ClassifiedLine:
    """
    A linkified line tagged with its structural role.

    ``number`` and ``title`` are set for main headings only. ``separated``
    marks a main heading that follows a sub-heading or prose and therefore
    gets a blank line in front of it.
    """
    kind: LineKind
    index: int
    text: str
    number: Optional[str] = None
    title: Optional[str] = None
    separated: bool = False


def classify_line(index: int, text: str, previous: Optional[str] = None) -> ClassifiedLine:
    """
    Classify one line of an outline.

    Args:
        index: Position of the line in the document (0-based).
        text: The line after linkification.
        previous: The raw, pre-linkification text of the line before it.

    Returns:
        The ClassifiedLine for ``text``.
    """
    main = MAIN_HEADING_RE.match(text)

    if index == 0 and text.strip() and not main:
        return ClassifiedLine(LineKind.TITLE, index, text)

    if main:
        return ClassifiedLine(
            LineKind.MAIN_HEADING,
            index,
            text,
            number=main.group(1),
            title=main.group(2),
            separated=index > 0 and _ends_block(previous),
        )

    if SUB_HEADING_RE.match(text):
        return ClassifiedLine(LineKind.SUB_HEADING, index, text)

    if is_prose(text):
        return ClassifiedLine(LineKind.PROSE, index, text)

    return ClassifiedLine(LineKind.BLANK, index, text)


def classify_lines(lines: Iterable[str]) -> Iterator[ClassifiedLine]:
    """Linkify and classify a sequence of raw lines."""
    previous = None
    for index, raw in enumerate(lines):
        yield classify_line(index, linkify(raw), previous)
        previous = raw


def format_line(line: ClassifiedLine) -> str:
    """Render a classified line as markdown."""
    if line.kind is LineKind.TITLE:
        return f"**{line.text}**"

    if line.kind is LineKind.MAIN_HEADING:
        heading = f"**{line.number}. {line.title}**"
        return f"\n{heading}" if line.separated else heading

    if line.kind in (LineKind.SUB_HEADING, LineKind.PROSE):
        return f"\n{line.text}" if line.index > 0 else line.text

    return line.text


def reformat(text: str) -> str:
    """
    Convert plain numbered-outline text to markdown.

    Args:
        text: The full input document.

    Returns:
        The markdown document, or an empty string for blank input.
    """
    if not text.strip():
        return ""

    lines = text.split("\n")
    return "\n".join(format_line(line) for line in classify_lines(lines))


def is_prose(text: str) -> bool:
    """True for a non-blank line that carries no outline number."""
    return bool(text.strip()) and not NUMBERED_RE.match(text)


def _ends_block(previous: Optional[str]) -> bool:
    if previous is None:
        return False
    return bool(SUB_HEADING_RE.match(previous)) or is_prose(previous)
