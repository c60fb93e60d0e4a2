"""
System clipboard access for copying converted markdown.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Optional

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    """Raised when text cannot be copied to the clipboard."""
    pass


class ClipboardUnavailable(ClipboardError):
    """No clipboard mechanism is available on this system."""
    pass


class ClipboardWriteFailed(ClipboardError):
    """A clipboard mechanism exists but the write did not succeed."""
    pass


class Clipboard:
    """
    Writes text to the system clipboard.

    By default the copy function is resolved through pyperclip each time
    the clipboard is acquired. Tests and headless callers can pass their
    own ``copy`` callable instead.
    """

    def __init__(self, copy: Optional[Callable[[str], None]] = None):
        self._copy = copy

    @contextmanager
    def acquire(self):
        """Yield a copy function for the duration of one write."""
        copy = self._copy
        if copy is None:
            try:
                copy, _paste = pyperclip.determine_clipboard()
            except pyperclip.PyperclipException as e:
                raise ClipboardUnavailable(str(e)) from e
        yield copy

    def write(self, text: str) -> None:
        """
        Copy ``text`` to the clipboard verbatim.

        Raises:
            ClipboardUnavailable: If no clipboard mechanism can be used.
            ClipboardWriteFailed: If the write itself fails.
        """
        with self.acquire() as copy:
            try:
                copy(text)
            except pyperclip.PyperclipException as e:
                raise ClipboardUnavailable(str(e)) from e
            except Exception as e:
                raise ClipboardWriteFailed(str(e)) from e
        logger.debug("Copied %d characters to clipboard", len(text))
