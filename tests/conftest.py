"""
Pytest configuration and shared fixtures.
"""

import io
import sys
from pathlib import Path
import pytest
from PIL import Image

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from mdconverter.clipboard import Clipboard
from mdconverter.session import ConverterSession
from tests.fixtures.sample_outlines import SAMPLE_OUTLINE, CONTACT_OUTLINE


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "network: mark as requiring network access")


# ============================================================================
# Clipboard Fixtures
# ============================================================================


class RecordingClipboard:
    """Collects copied text instead of touching the system clipboard."""

    def __init__(self):
        self.copied = []

    def __call__(self, text):
        self.copied.append(text)


@pytest.fixture
def recorder():
    """A copy function that records what was written."""
    return RecordingClipboard()


@pytest.fixture
def fake_clipboard(recorder):
    """A Clipboard backed by the recorder."""
    return Clipboard(copy=recorder)


# ============================================================================
# Session Fixtures
# ============================================================================


@pytest.fixture
def session(fake_clipboard):
    """A converter session that never touches the real clipboard."""
    return ConverterSession(clipboard=fake_clipboard)


# ============================================================================
# Content Fixtures
# ============================================================================


@pytest.fixture
def sample_outline():
    return SAMPLE_OUTLINE


@pytest.fixture
def contact_outline():
    return CONTACT_OUTLINE


# ============================================================================
# Image Fixtures
# ============================================================================


@pytest.fixture
def logo_image():
    """A 20x20 white image with a red 6x6 square in the middle."""
    image = Image.new("RGB", (20, 20), (255, 255, 255))
    for x in range(7, 13):
        for y in range(7, 13):
            image.putpixel((x, y), (200, 0, 0))
    return image


@pytest.fixture
def logo_png_bytes(logo_image):
    buffer = io.BytesIO()
    logo_image.save(buffer, format="PNG")
    return buffer.getvalue()
