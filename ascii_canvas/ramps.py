"""
Glyph Ramp Definitions and Utilities

Provides the named glyph ramps used to approximate brightness:
- Numbered ramps "1", "2", "4", "8", "16": growing tonal resolution
- Symbolic variants: letters, numbers, dots, blocks, blocks-alternate, custom

Index 0 of every ramp is the emptiest glyph and is used for the darkest
pixels; the last index is used for the brightest. The ``negative`` flag
mirrors that order. Ramp tables are tuples and are never modified in place.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import EmptyRamp, UnknownRamp


# ============================================================================
# RAMP DEFINITIONS
# ============================================================================

RAMP_1 = (" ", ".")
RAMP_2 = (" ", ".", "#")
RAMP_4 = (" ", ".", ".", "|", "#")
RAMP_8 = (" ", ".", ":", "-", "=", "+", "*", "#")
RAMP_16 = (
    " ", ".", ":", "-", "=", "+", "*", "W",
    "M", "8", "B", "Q", "$", "%", "#", "@",
)

RAMP_LETTERS = (
    " ", "a", "b", "c", "d", "e", "f", "g", "h",
    "i", "j", "k", "l", "m", "n", "o", "p",
)
RAMP_NUMBERS = (" ", "1", "7", "2", "3", "4", "5", "6", "0", "8", "9")
RAMP_DOTS = (" ", "_", ":", ";", "-", ".", "|", "=", "+")

# Unicode block elements
RAMP_BLOCKS = (" ", "░", "▒", "▓", "█")
RAMP_BLOCKS_ALTERNATE = (" ", "▝", "▅", "▚", "▙", "▉")
RAMP_CUSTOM = (" ", "▢", "▣", "▨", "▩")

RAMPS: Dict[str, Tuple[str, ...]] = {
    "1": RAMP_1,
    "2": RAMP_2,
    "4": RAMP_4,
    "8": RAMP_8,
    "16": RAMP_16,
    "letters": RAMP_LETTERS,
    "numbers": RAMP_NUMBERS,
    "dots": RAMP_DOTS,
    "blocks": RAMP_BLOCKS,
    "blocks-alternate": RAMP_BLOCKS_ALTERNATE,
    "custom": RAMP_CUSTOM,
}

DEFAULT_RAMP = "8"


@dataclass(frozen=True)
class RampConfig:
    """
    A glyph ramp plus its polarity.

    Attributes:
        glyphs: Glyphs ordered from least to most visually dense
        negative: Reverse the order before mapping
        key: Name of the preset the glyphs came from (None for ad-hoc ramps)
    """
    glyphs: Tuple[str, ...]
    negative: bool = False
    key: Optional[str] = None

    @classmethod
    def from_glyphs(cls, glyphs: Iterable[str], negative: bool = False) -> "RampConfig":
        """Build a ramp from any iterable of glyphs (a plain string works too)."""
        return cls(glyphs=tuple(glyphs), negative=negative)

    @property
    def effective(self) -> Tuple[str, ...]:
        """Glyph order actually used for mapping."""
        if self.negative:
            return tuple(reversed(self.glyphs))
        return tuple(self.glyphs)

    def __len__(self) -> int:
        return len(self.glyphs)

    def preview(self) -> str:
        return " ".join(self.effective)


# ============================================================================
# RAMP LOOKUP
# ============================================================================

def get_ramp(key: str = DEFAULT_RAMP, negative: bool = False) -> RampConfig:
    """
    Get a named ramp.

    Args:
        key: Preset name (see list_ramps())
        negative: Reverse the glyph order

    Returns:
        RampConfig for the preset

    Raises:
        UnknownRamp: If the key is not a preset
        EmptyRamp: If the preset has no glyphs
    """
    key = str(key)
    if key not in RAMPS:
        raise UnknownRamp(key, RAMPS.keys())

    glyphs = RAMPS[key]
    if not glyphs:
        raise EmptyRamp(key)

    return RampConfig(glyphs=glyphs, negative=bool(negative), key=key)


def list_ramps() -> List[str]:
    """List all available ramp names."""
    return list(RAMPS.keys())


def effective_ramp(ramp_key: str, negative: bool = False) -> Tuple[str, ...]:
    """
    Glyph sequence for a preset after applying polarity.

    Rendering and preview both go through this, so the preview text always
    shows the order the renderer will use.
    """
    return get_ramp(ramp_key, negative).effective


def preview_ramp(ramp_key: str, negative: bool = False) -> str:
    """Effective glyphs joined by single spaces, e.g. '  . : - = + * #'."""
    return " ".join(effective_ramp(ramp_key, negative))
