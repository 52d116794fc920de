"""
Image Scaling

Resizes a source image to the character grid:
- Pixel perfect: one glyph per source pixel
- Auto: fixed width of 135 glyphs
- Manual: caller-chosen width (falls back to 235 when invalid)

Auto and manual modes multiply the scaled height by a vertical stretch
factor, because text glyphs are taller than they are wide.
"""

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

import cv2
import numpy as np

from .errors import InvalidDimensions
from .image import SourceImage

logger = logging.getLogger(__name__)


AUTO_WIDTH = 135
MANUAL_FALLBACK_WIDTH = 235
DEFAULT_VERTICAL_STRETCH = 1.0
# Largest grid side accepted for resampled output (SHRT_MAX)
MAX_GRID_SIDE = 32767

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ScaleMode(str, Enum):
    PIXEL_PERFECT = "pixel-perfect"
    AUTO = "auto"
    MANUAL = "manual"

    @classmethod
    def parse(cls, value: Union["ScaleMode", str]) -> "ScaleMode":
        """Accept enum members, their values ('pixel-perfect') or names ('PIXEL_PERFECT')."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        try:
            return cls(text.lower().replace("_", "-"))
        except ValueError:
            raise ValueError(
                f"Unknown scale mode: {value}. Available: {[m.value for m in cls]}"
            ) from None


def parse_width(value) -> Optional[int]:
    """
    Read a requested width the way a number input would.

    Strings use their leading integer ("87px" -> 87), floats are truncated.
    Returns None when no integer can be read.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


@dataclass(frozen=True)
class ScalingPolicy:
    """
    How to size the character grid.

    Attributes:
        mode: Pixel perfect, auto or manual
        requested_width: Target width for manual mode (any loose value)
        vertical_stretch: Multiplier applied to the scaled height only
    """
    mode: ScaleMode = ScaleMode.AUTO
    requested_width: Optional[object] = None
    vertical_stretch: float = DEFAULT_VERTICAL_STRETCH

    def __post_init__(self):
        object.__setattr__(self, "mode", ScaleMode.parse(self.mode))
        object.__setattr__(self, "vertical_stretch", float(self.vertical_stretch))

    @classmethod
    def pixel_perfect(cls) -> "ScalingPolicy":
        return cls(mode=ScaleMode.PIXEL_PERFECT)

    @classmethod
    def auto(cls, vertical_stretch: float = DEFAULT_VERTICAL_STRETCH) -> "ScalingPolicy":
        return cls(mode=ScaleMode.AUTO, vertical_stretch=vertical_stretch)

    @classmethod
    def manual(
        cls,
        requested_width=MANUAL_FALLBACK_WIDTH,
        vertical_stretch: float = DEFAULT_VERTICAL_STRETCH,
    ) -> "ScalingPolicy":
        return cls(
            mode=ScaleMode.MANUAL,
            requested_width=requested_width,
            vertical_stretch=vertical_stretch,
        )

    @property
    def reference_width(self) -> Optional[int]:
        """Width the source is scaled towards (None in pixel perfect mode)."""
        if self.mode is ScaleMode.PIXEL_PERFECT:
            return None
        if self.mode is ScaleMode.AUTO:
            return AUTO_WIDTH

        width = parse_width(self.requested_width)
        if width is None or width < 1:
            return MANUAL_FALLBACK_WIDTH
        return width

    def target_size(self, source_width: int, source_height: int) -> Tuple[int, int]:
        """
        Compute the (width, height) of the character grid.

        Raises:
            InvalidDimensions: If either side comes out below 1, or a
                resampled side exceeds MAX_GRID_SIDE
        """
        if self.mode is ScaleMode.PIXEL_PERFECT:
            width, height = source_width, source_height
        else:
            if source_width <= 0:
                raise InvalidDimensions(source_width, source_height, "Source image is empty")
            # Kept as divide-then-floor: truncation differs from using the
            # reference width directly at extreme aspect ratios.
            scale_factor = source_width / self.reference_width
            raw_width = source_width / scale_factor
            raw_height = source_height / scale_factor * self.vertical_stretch
            if not (math.isfinite(raw_width) and math.isfinite(raw_height)):
                raise InvalidDimensions(raw_width, raw_height)
            width, height = math.floor(raw_width), math.floor(raw_height)
            if width > MAX_GRID_SIDE or height > MAX_GRID_SIDE:
                raise InvalidDimensions(
                    width, height, f"Target dimensions {width}x{height} exceed {MAX_GRID_SIDE}"
                )

        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)
        return width, height


@dataclass(frozen=True)
class ScaledImage:
    """RGBA pixels at character-grid resolution, shape (height, width, 4)."""
    width: int
    height: int
    pixels: np.ndarray

    @property
    def buffer(self) -> np.ndarray:
        """Flat [r, g, b, a, ...] view, width * height * 4 long."""
        return self.pixels.reshape(-1)


def scale(source: SourceImage, policy: ScalingPolicy) -> ScaledImage:
    """
    Resample the source image to the grid size chosen by the policy.

    Args:
        source: Decoded source image (not modified)
        policy: Scaling policy

    Returns:
        ScaledImage with a freshly allocated pixel array

    Raises:
        InvalidDimensions: If the grid collapses to zero width or height,
            grows past MAX_GRID_SIDE, or OpenCV rejects the target size
    """
    width, height = policy.target_size(source.width, source.height)

    if (width, height) == source.size:
        pixels = np.array(source.pixels)
    else:
        shrinking = width < source.width or height < source.height
        interpolation = cv2.INTER_AREA if shrinking else cv2.INTER_LINEAR
        try:
            pixels = cv2.resize(
                np.array(source.pixels),  # cv2 wants a writable array
                (width, height),
                interpolation=interpolation,
            )
        except cv2.error as exc:
            raise InvalidDimensions(
                width, height, f"Cannot resample to {width}x{height}: {exc}"
            ) from exc

    logger.debug(
        "Scaled %dx%d -> %dx%d (%s)",
        source.width, source.height, width, height, policy.mode.value,
    )
    return ScaledImage(width=width, height=height, pixels=pixels)
