"""
Source Image Container

Wraps a decoded bitmap as an immutable RGBA array. A new upload produces a
new SourceImage; existing instances are never modified, so any number of
renders can read the same image at once.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image

from .errors import InvalidDimensions, MalformedBuffer

logger = logging.getLogger(__name__)

ImageLike = Union["SourceImage", Image.Image, np.ndarray, str, Path]


@dataclass(frozen=True)
class SourceImage:
    """
    Immutable decoded bitmap.

    Attributes:
        pixels: Read-only uint8 array of shape (height, width, 4), RGBA
    """
    pixels: np.ndarray

    def __post_init__(self):
        pixels = np.array(self.pixels, dtype=np.uint8, copy=True)
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise MalformedBuffer(
                expected=pixels.shape[0] * pixels.shape[1] * 4 if pixels.ndim >= 2 else 0,
                actual=pixels.size,
            )
        height, width = pixels.shape[:2]
        if width < 1 or height < 1:
            raise InvalidDimensions(width, height, "Source image is empty")

        pixels.setflags(write=False)
        object.__setattr__(self, "pixels", pixels)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height), PIL order."""
        return self.width, self.height

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """RGBA value at column x, row y."""
        r, g, b, a = self.pixels[y, x]
        return int(r), int(g), int(b), int(a)

    def to_pil(self) -> Image.Image:
        return Image.fromarray(np.array(self.pixels))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_pil(cls, image: Image.Image) -> "SourceImage":
        """Decode any Pillow image mode into RGBA."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls(np.asarray(image))

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "SourceImage":
        """
        Load an image file from disk.

        Raises:
            FileNotFoundError: If the path does not exist
            PIL.UnidentifiedImageError: If the file is not a readable image
        """
        path = Path(path)
        with Image.open(path) as img:
            img.load()
            source = cls.from_pil(img)
        logger.debug("Loaded %s (%dx%d)", path, source.width, source.height)
        return source

    @classmethod
    def from_rgba(cls, data, width: int, height: int) -> "SourceImage":
        """
        Build from a flat [r, g, b, a, r, g, b, a, ...] buffer.

        Raises:
            InvalidDimensions: If width or height is below 1
            MalformedBuffer: If len(data) != width * height * 4
        """
        if width < 1 or height < 1:
            raise InvalidDimensions(width, height, "Source image is empty")
        flat = np.asarray(data, dtype=np.uint8).reshape(-1)
        expected = width * height * 4
        if flat.size != expected:
            raise MalformedBuffer(expected, flat.size)
        return cls(flat.reshape(height, width, 4))


def as_source_image(image: ImageLike) -> SourceImage:
    """Coerce a PIL image, path, RGBA array or SourceImage to a SourceImage."""
    if isinstance(image, SourceImage):
        return image
    if isinstance(image, Image.Image):
        return SourceImage.from_pil(image)
    if isinstance(image, (str, Path)):
        return SourceImage.from_path(image)
    if isinstance(image, np.ndarray):
        if image.ndim == 3 and image.shape[2] == 4:
            return SourceImage(image)
        # Grayscale or RGB arrays go through PIL for the mode conversion
        return SourceImage.from_pil(Image.fromarray(np.asarray(image, dtype=np.uint8)))
    raise TypeError(f"Unsupported image type: {type(image).__name__}")
