"""
Unit tests for logo background removal.
"""

import io

import pytest
import requests
from PIL import Image

from mdconverter.logo import (
    LOGO_URL,
    MAX_IMAGE_DIMENSION,
    LogoProcessingError,
    LogoProcessor,
    fetch_image,
    load_image,
    remove_background,
)


def _decode(png_bytes):
    return Image.open(io.BytesIO(png_bytes))


class TestRemoveBackground:
    """Tests for the Pillow background removal step."""

    def test_corners_become_transparent(self, logo_image):
        result = _decode(remove_background(logo_image))

        assert result.mode == "RGBA"
        assert result.getpixel((0, 0))[3] == 0
        assert result.getpixel((19, 19))[3] == 0

    def test_foreground_is_kept(self, logo_image):
        result = _decode(remove_background(logo_image))
        assert result.getpixel((10, 10)) == (200, 0, 0, 255)

    def test_large_images_are_scaled_down(self):
        image = Image.new("RGB", (MAX_IMAGE_DIMENSION * 2, 100), (255, 255, 255))
        result = _decode(remove_background(image))
        assert max(result.size) == MAX_IMAGE_DIMENSION

    def test_already_transparent_corners_are_left_alone(self):
        image = Image.new("RGBA", (10, 10), (0, 0, 0, 0))
        image.putpixel((5, 5), (10, 10, 10, 255))

        result = _decode(remove_background(image))

        assert result.getpixel((5, 5)) == (10, 10, 10, 255)


class TestLoadImage:

    def test_load_png(self, logo_png_bytes):
        image = load_image(logo_png_bytes)
        assert image.size == (20, 20)

    def test_garbage_raises(self):
        with pytest.raises(LogoProcessingError, match="Cannot decode image"):
            load_image(b"definitely not an image")


class TestFetchImage:

    def test_request_errors_are_wrapped(self, monkeypatch):
        def refuse(url, timeout):
            raise requests.ConnectionError("offline")

        monkeypatch.setattr(requests, "get", refuse)

        with pytest.raises(LogoProcessingError, match="offline"):
            fetch_image("https://example.com/logo.png")


class TestLogoProcessor:
    """Tests for the fetch -> load -> remove pipeline."""

    def test_defaults_to_bundled_logo_url(self):
        assert LogoProcessor().url == LOGO_URL

    def test_successful_pipeline(self, logo_png_bytes):
        processor = LogoProcessor(url="https://example.com/logo.png", fetcher=lambda url: logo_png_bytes)

        logo = processor.process()

        assert isinstance(logo, bytes)
        assert processor.processed_logo == logo
        assert processor.fallback_url is None
        assert processor.is_processing is False

    def test_fetch_failure_falls_back_to_url(self):
        def offline(url):
            raise LogoProcessingError("offline")

        processor = LogoProcessor(url="https://example.com/logo.png", fetcher=offline)

        assert processor.process() == "https://example.com/logo.png"
        assert processor.processed_logo is None
        assert processor.is_processing is False

    def test_remover_failure_falls_back_to_url(self, logo_png_bytes):
        def explode(image):
            raise MemoryError("too big")

        processor = LogoProcessor(
            url="https://example.com/logo.png",
            fetcher=lambda url: logo_png_bytes,
            remover=explode,
        )

        assert processor.process() == "https://example.com/logo.png"

    def test_logo_is_none_before_processing(self):
        assert LogoProcessor(fetcher=lambda url: b"").logo is None

    def test_background_thread(self, logo_png_bytes):
        processor = LogoProcessor(fetcher=lambda url: logo_png_bytes)

        processor.start()
        logo = processor.wait(timeout=10)

        assert isinstance(logo, bytes)
        assert processor.is_processing is False

    def test_start_runs_once(self, logo_png_bytes):
        calls = []

        def fetch(url):
            calls.append(url)
            return logo_png_bytes

        processor = LogoProcessor(fetcher=fetch)
        processor.start()
        processor.start()
        processor.wait(timeout=10)

        assert len(calls) == 1
