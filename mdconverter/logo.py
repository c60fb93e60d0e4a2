"""
Logo background removal.

Fetches the application logo once at startup, strips its background and
keeps the result as PNG bytes. If any step fails the original image URL
is used instead.
"""

import io
import logging
import threading
from typing import Callable, Optional, Union

import requests
from PIL import Image, ImageDraw

logger = logging.getLogger(__name__)

LOGO_URL = "https://lovable-uploads.s3.amazonaws.com/92c68078-1244-4e00-8c95-5b4d93742c71.png"

# Longest side of the processed image, in pixels
MAX_IMAGE_DIMENSION = 1024

# Summed per-channel colour distance still counted as background
BACKGROUND_TOLERANCE = 60

TRANSPARENT = (0, 0, 0, 0)


class LogoProcessingError(Exception):
    """Raised when the logo cannot be fetched, decoded or processed."""
    pass


def fetch_image(url: str, timeout: int = 30) -> bytes:
    """Download an image and return its raw bytes."""
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise LogoProcessingError(f"Failed to fetch {url}: {e}") from e
    return response.content


def load_image(data: bytes) -> Image.Image:
    """Decode image bytes into a Pillow image."""
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except OSError as e:
        raise LogoProcessingError(f"Cannot decode image: {e}") from e
    return image


def remove_background(image: Image.Image, tolerance: int = BACKGROUND_TOLERANCE) -> bytes:
    """
    Make the background of an image transparent.

    The background is whatever region of similar colour touches one of the
    four corners. Images larger than MAX_IMAGE_DIMENSION are scaled down
    first.

    Args:
        image: The decoded source image.
        tolerance: Colour distance from the corner pixel still filled.

    Returns:
        The processed image encoded as PNG.
    """
    rgba = image.convert("RGBA")
    rgba.thumbnail((MAX_IMAGE_DIMENSION, MAX_IMAGE_DIMENSION))

    width, height = rgba.size
    corners = [(0, 0), (width - 1, 0), (0, height - 1), (width - 1, height - 1)]
    for xy in corners:
        if rgba.getpixel(xy)[3] == 0:
            continue
        ImageDraw.floodfill(rgba, xy, TRANSPARENT, thresh=tolerance)

    buffer = io.BytesIO()
    rgba.save(buffer, format="PNG")
    return buffer.getvalue()


class LogoProcessor:
    """
    Runs the fetch -> load -> remove-background pipeline for one image.

    The pipeline steps are injectable so the processor can run without
    network access.
    """

    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        url: str = LOGO_URL,
        fetcher: Optional[Callable[[str], bytes]] = None,
        loader: Callable[[bytes], Image.Image] = load_image,
        remover: Callable[[Image.Image], bytes] = remove_background,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        self.url = url
        self.timeout = timeout
        self._fetcher = fetcher or self._fetch
        self._loader = loader
        self._remover = remover
        self._thread: Optional[threading.Thread] = None

        self.processed_logo: Optional[bytes] = None
        self.fallback_url: Optional[str] = None
        self.is_processing = False

    @property
    def logo(self) -> Optional[Union[bytes, str]]:
        """Processed PNG bytes, the fallback URL, or None if not yet run."""
        return self.processed_logo if self.processed_logo is not None else self.fallback_url

    def process(self) -> Union[bytes, str]:
        """Run the pipeline synchronously and return the resulting logo."""
        self.is_processing = True
        try:
            data = self._fetcher(self.url)
            image = self._loader(data)
            self.processed_logo = self._remover(image)
        except Exception:
            logger.exception("Failed to process logo, using original image")
            self.fallback_url = self.url
        finally:
            self.is_processing = False
        return self.logo

    def start(self) -> None:
        """Run the pipeline once on a background thread."""
        if self._thread is not None:
            return
        self.is_processing = True
        self._thread = threading.Thread(target=self.process, name="logo-processor", daemon=True)
        self._thread.start()

    def wait(self, timeout: Optional[float] = None) -> Optional[Union[bytes, str]]:
        """Block until background processing finishes (or times out)."""
        if self._thread is not None:
            self._thread.join(timeout)
        return self.logo

    def _fetch(self, url: str) -> bytes:
        return fetch_image(url, timeout=self.timeout)
