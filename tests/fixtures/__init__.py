# Test fixtures
from .sample_outlines import (
    SAMPLE_OUTLINE,
    SAMPLE_OUTLINE_MD,
    CONTACT_OUTLINE,
    CONTACT_OUTLINE_MD,
)

__all__ = [
    "SAMPLE_OUTLINE",
    "SAMPLE_OUTLINE_MD",
    "CONTACT_OUTLINE",
    "CONTACT_OUTLINE_MD",
]
