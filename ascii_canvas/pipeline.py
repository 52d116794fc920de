"""
End-to-End Image-to-ASCII Pipeline

Unified interface combining:
- Source image loading
- Grid scaling (pixel perfect / auto / manual)
- Brightness-to-glyph mapping with selectable ramps

This is the main entry point for the library.
"""

import logging
import threading
from typing import Optional

from .config import ConfigSnapshot
from .errors import NoImageLoaded
from .image import ImageLike, SourceImage, as_source_image
from .mapper import RenderResult, render
from .scaling import scale

logger = logging.getLogger(__name__)


def convert(source: SourceImage, config: Optional[ConfigSnapshot] = None) -> RenderResult:
    """
    Render a source image with the given settings.

    Args:
        source: Decoded source image
        config: Settings snapshot (defaults to ConfigSnapshot())

    Returns:
        RenderResult
    """
    config = config or ConfigSnapshot()
    ramp = config.ramp()
    scaled = scale(source, config.to_policy())
    return render(scaled.pixels, scaled.width, scaled.height, ramp)


def image_to_ascii(image: ImageLike, **settings) -> RenderResult:
    """
    Convert a PIL image, path or array to ASCII art in one call.

    Keyword arguments are ConfigSnapshot fields, e.g.
    ``image_to_ascii("cat.png", scale_mode="manual", manual_width=87)``.
    """
    return convert(as_source_image(image), ConfigSnapshot(**settings))


class ConversionSession:
    """
    Holds the loaded image and current settings for an interactive host.

    Every settings change produces a new snapshot and a full re-render.
    Renders are serialized, and last_result only ever holds a complete result.

    Example:
        >>> session = ConversionSession()
        >>> session.load("photo.png")
        >>> result = session.update(ramp_key="blocks", negative=True)
        >>> print(result.text)
    """

    def __init__(self, config: Optional[ConfigSnapshot] = None):
        self.config = config or ConfigSnapshot()
        self._source: Optional[SourceImage] = None
        self._last_result: Optional[RenderResult] = None
        self._lock = threading.Lock()

    @property
    def source(self) -> Optional[SourceImage]:
        return self._source

    @property
    def has_image(self) -> bool:
        return self._source is not None

    @property
    def last_result(self) -> Optional[RenderResult]:
        return self._last_result

    def load(self, image: ImageLike) -> SourceImage:
        """Replace the current image with a new one."""
        source = as_source_image(image)
        with self._lock:
            self._source = source
            self._last_result = None
        logger.info("Image loaded (%dx%d)", source.width, source.height)
        return source

    def render(self) -> RenderResult:
        """
        Render the loaded image with the current settings.

        Raises:
            NoImageLoaded: If no image has been loaded
        """
        with self._lock:
            if self._source is None:
                raise NoImageLoaded()
            result = convert(self._source, self.config)
            self._last_result = result
        logger.debug("Character count: %d", result.char_count)
        return result

    def _apply(self, make_config) -> Optional[RenderResult]:
        # Settings and result are committed together, only once the new
        # snapshot has resolved its ramp and rendered without error.
        with self._lock:
            config = make_config(self.config)
            config.ramp()
            if self._source is None:
                self.config = config
                return None
            result = convert(self._source, config)
            self.config = config
            self._last_result = result
        logger.debug("Character count: %d", result.char_count)
        return result

    def update(self, **changes) -> Optional[RenderResult]:
        """
        Change settings and re-render.

        Returns None when no image is loaded yet; the new settings are kept
        for the next render. If the new settings fail to resolve or render,
        the error propagates and the session keeps its previous settings.
        """
        return self._apply(lambda config: config.replace(**changes))

    def apply_preset(self, name: str) -> Optional[RenderResult]:
        """Apply a display preset and re-render (None if no image loaded)."""
        return self._apply(lambda config: config.with_preset(name))

    def preview(self) -> str:
        """Active ramp as space-separated glyphs."""
        return self.config.preview()
