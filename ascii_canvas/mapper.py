"""
Brightness-to-Glyph Mapper

Maps each pixel of a scaled RGBA buffer to one glyph of a ramp:

    brightness = (r + g + b) / 3            # alpha ignored
    index      = floor(brightness / 256 * N)

Dividing by 256 (not 255) keeps index 255 inside the ramp. Every row,
including the last, ends with a newline.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import numpy as np

from .errors import EmptyRamp, InvalidDimensions, MalformedBuffer
from .ramps import RampConfig

logger = logging.getLogger(__name__)

ROW_TERMINATOR = "\n"


@dataclass(frozen=True)
class RenderResult:
    """
    Rendered ASCII art plus grid metadata.

    Attributes:
        text: Rows of glyphs, each terminated by a newline
        width: Glyphs per row
        height: Number of rows
        char_count: width * height
    """
    text: str
    width: int
    height: int
    char_count: int

    @property
    def rows(self) -> List[str]:
        """The glyph rows without terminators."""
        return self.text.split(ROW_TERMINATOR)[:self.height]

    def display(self, max_width: Optional[int] = None):
        """
        Print the ASCII art to the terminal.

        Args:
            max_width: Maximum width to display (truncates if needed)
        """
        if max_width:
            for row in self.rows:
                print(row[:max_width])
        else:
            print(self.text, end="")

    def __repr__(self) -> str:
        return f"RenderResult(width={self.width}, height={self.height}, char_count={self.char_count})"

    def __str__(self) -> str:
        return self.text


def brightness_indices(pixels: np.ndarray, ramp_length: int) -> np.ndarray:
    """
    Ramp index for every pixel of an (..., 4) RGBA array.

    Clamped to ramp_length - 1 so float drift can never index past the end.
    """
    rgb = pixels[..., :3].astype(np.float64)
    brightness = (rgb[..., 0] + rgb[..., 1] + rgb[..., 2]) / 3
    indices = np.floor((brightness / 256) * ramp_length).astype(np.intp)
    return np.clip(indices, 0, ramp_length - 1)


def _grid_size(width, height) -> Tuple[int, int]:
    """Grid sides as ints; integral floats such as 2.0 are accepted."""
    sides = []
    for value in (width, height):
        try:
            side = int(value)
        except (TypeError, ValueError, OverflowError):
            raise InvalidDimensions(width, height) from None
        if side != value:
            raise InvalidDimensions(width, height)
        sides.append(side)
    return sides[0], sides[1]


def render(
    pixels: Union[np.ndarray, bytes, bytearray, list],
    width: int,
    height: int,
    ramp: RampConfig,
) -> RenderResult:
    """
    Convert an RGBA buffer to ASCII art.

    Args:
        pixels: width * height * 4 RGBA values in row-major order (flat
            sequence, bytes, or a numpy array of any matching shape)
        width: Grid width in cells
        height: Grid height in cells
        ramp: Glyph ramp and polarity

    Returns:
        RenderResult

    Raises:
        EmptyRamp: If the ramp has no glyphs
        InvalidDimensions: If width or height is below 1 or not a whole number
        MalformedBuffer: If the buffer size is not width * height * 4
    """
    glyphs = ramp.effective
    if len(glyphs) == 0:
        raise EmptyRamp(ramp.key)
    width, height = _grid_size(width, height)
    if width < 1 or height < 1:
        raise InvalidDimensions(width, height)

    if isinstance(pixels, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(pixels, dtype=np.uint8)
    else:
        flat = np.asarray(pixels).reshape(-1)
    expected = width * height * 4
    if flat.size != expected:
        raise MalformedBuffer(expected, flat.size)

    grid = flat.reshape(height, width, 4)
    indices = brightness_indices(grid, len(glyphs))

    # Glyphs may be multi-character strings, so look up through an object array
    lookup = np.array(glyphs, dtype=object)
    rows = ["".join(row) for row in lookup[indices]]
    text = "".join(row + ROW_TERMINATOR for row in rows)

    logger.debug("Rendered %dx%d grid with %d-glyph ramp", width, height, len(glyphs))
    return RenderResult(text=text, width=width, height=height, char_count=width * height)
