"""
Per-user converter state: the input text, the converted output, and the
copy / clear actions a front end wires to its buttons.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .clipboard import Clipboard, ClipboardError
from .formatting import reformat

logger = logging.getLogger(__name__)


class ConversionFailure(Exception):
    """Raised when reformatting the input text fails unexpectedly."""
    pass


@dataclass(frozen=True)
class Notification:
    """A short message for the user, shown by the front end as a toast."""
    title: str
    description: str
    variant: str = "default"  # "default" or "destructive"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


class ConverterSession:
    """
    Holds the text state of one converter view.

    Every input change is converted synchronously. On failure the previous
    output is kept and an error notification is queued instead.
    """

    def __init__(
        self,
        converter: Callable[[str], str] = reformat,
        clipboard: Optional[Clipboard] = None,
    ):
        self.input_text = ""
        self.output_text = ""
        self.notifications: list[Notification] = []
        self._converter = converter
        self._clipboard = clipboard or Clipboard()

    def update_input(self, text: str) -> str:
        """
        Store new input text and recompute the output.

        Args:
            text: The full contents of the input box.

        Returns:
            The current output text (unchanged if conversion failed).
        """
        self.input_text = text
        try:
            self.output_text = self._convert(text)
        except ConversionFailure:
            logger.exception("Error converting text")
            self._notify("Error", "Failed to convert text", "destructive")
        return self.output_text

    def copy_to_clipboard(self) -> bool:
        """
        Copy the output text to the system clipboard.

        Returns:
            True if text was copied, False if there was nothing to copy or
            the clipboard write failed.
        """
        if not self.output_text:
            return False

        try:
            self._clipboard.write(self.output_text)
        except ClipboardError as e:
            logger.warning("Clipboard write failed: %s", e)
            self._notify("Error", str(e) or "Failed to copy to clipboard", "destructive")
            return False

        self._notify("Copied!", "Markdown text copied to clipboard")
        return True

    def clear_all(self) -> None:
        """Reset input and output to empty."""
        self.input_text = ""
        self.output_text = ""
        self._notify("Cleared", "All text has been cleared")

    def drain_notifications(self) -> list[Notification]:
        """Return queued notifications and empty the queue."""
        pending, self.notifications = self.notifications, []
        return pending

    def _convert(self, text: str) -> str:
        try:
            return self._converter(text)
        except Exception as e:
            raise ConversionFailure(f"Could not convert input: {e}") from e

    def _notify(self, title: str, description: str, variant: str = "default") -> None:
        self.notifications.append(Notification(title, description, variant))
