"""Gradio browser UI for the markdown converter."""

from __future__ import annotations

import io
import logging
from typing import Any, Callable, Iterable, Optional, Tuple

import gradio as gr
from PIL import Image

from mdconverter.clipboard import Clipboard
from mdconverter.logo import LogoProcessor
from mdconverter.session import ConverterSession, Notification

logger = logging.getLogger(__name__)

TITLE = "Markdown Converter"

DESCRIPTION = (
    "Convert plain text with numbered headings to markdown format. "
    "Main headings (1. Title) become bold, sub-numbering (1.1, 2.2) stays unchanged."
)

PLACEHOLDER = (
    "Enter your plain text here...\n\n"
    "Example:\n"
    "1. Introduction\n"
    "1.1 Overview\n"
    "1.2 Purpose\n"
    "2. Scope\n"
    "2.1 Project goals"
)

# Seconds to wait for the background logo pipeline on page load
LOGO_WAIT_SECONDS = 10

# Runs in the user's browser before the server-side copy handler
COPY_JS = """
(text) => {
    if (text) {
        navigator.clipboard.writeText(text);
    }
    return text;
}
"""


def _copied_in_browser(text: str) -> None:
    # COPY_JS has already written the text on the client
    logger.debug("Browser copied %d characters", len(text))


def browser_session() -> ConverterSession:
    """A session whose clipboard is the visitor's browser, not the server's."""
    return ConverterSession(clipboard=Clipboard(copy=_copied_in_browser))


def _show(notifications: Iterable[Notification]) -> None:
    for note in notifications:
        message = f"{note.title}: {note.description}"
        if note.is_error:
            gr.Warning(message)
        else:
            gr.Info(message)


def on_input_change(text: str, session: ConverterSession) -> Tuple[str, Any, ConverterSession]:
    output = session.update_input(text or "")
    _show(session.drain_notifications())
    return output, gr.update(interactive=bool(output)), session


def on_copy(session: ConverterSession) -> ConverterSession:
    session.copy_to_clipboard()
    _show(session.drain_notifications())
    return session


def on_clear(session: ConverterSession) -> Tuple[str, str, Any, ConverterSession]:
    session.clear_all()
    _show(session.drain_notifications())
    return "", "", gr.update(interactive=False), session


def logo_image(processor: LogoProcessor) -> Optional[Any]:
    """Return the processed logo as a PIL image, or the fallback URL."""
    logo = processor.wait(LOGO_WAIT_SECONDS)
    if isinstance(logo, bytes):
        return Image.open(io.BytesIO(logo))
    return logo


def build_app(
    session_factory: Callable[[], ConverterSession] = browser_session,
    logo: Optional[LogoProcessor] = None,
) -> gr.Blocks:
    with gr.Blocks(title=TITLE) as demo:
        session = gr.State(session_factory)

        with gr.Row():
            if logo is not None:
                logo_output = gr.Image(
                    show_label=False, interactive=False, height=64, width=64, scale=0
                )
            gr.Markdown(f"# {TITLE}\n\n{DESCRIPTION}")

        with gr.Row():
            with gr.Column(scale=1):
                gr.Markdown("### Plain Text Input")
                input_box = gr.Textbox(
                    show_label=False, placeholder=PLACEHOLDER, lines=18
                )
                clear_button = gr.Button("Clear")
            with gr.Column(scale=1):
                gr.Markdown("### Markdown Output")
                output_box = gr.Textbox(
                    show_label=False,
                    placeholder="Converted markdown will appear here...",
                    lines=18,
                    interactive=False,
                )
                copy_button = gr.Button("Copy Markdown", variant="primary", interactive=False)

        with gr.Accordion("How it works", open=False):
            gr.Markdown(
                "**Input (Plain Text):**\n\n"
                "```\n1. Introduction\n1.1 Overview\n1.2 Purpose\n2. Scope\n2.1 Project goals\n```\n\n"
                "**Output (Markdown):**\n\n"
                "```\n**1. Introduction**\n\n1.1 Overview\n\n1.2 Purpose\n\n**2. Scope**\n\n2.1 Project goals\n```"
            )

        input_box.change(
            on_input_change,
            inputs=[input_box, session],
            outputs=[output_box, copy_button, session],
        )
        copy_button.click(None, inputs=[output_box], js=COPY_JS).then(
            on_copy, inputs=[session], outputs=[session]
        )
        clear_button.click(
            on_clear,
            inputs=[session],
            outputs=[input_box, output_box, copy_button, session],
        )

        if logo is not None:
            demo.load(lambda: logo_image(logo), outputs=[logo_output])

    return demo


def launch(**kwargs) -> None:
    """Start logo processing in the background and serve the app."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    processor = LogoProcessor()
    processor.start()
    build_app(logo=processor).launch(**kwargs)


if __name__ == "__main__":
    launch()
