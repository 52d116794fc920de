"""
Image-to-ASCII Art Converter

Turns a raster image into text art:
- Scaling to a character grid (pixel perfect, auto or manual width)
- Vertical stretch to correct for tall glyph cells
- Brightness-to-glyph mapping over named ramps, with negative polarity
"""

__version__ = "1.0.0"

from .config import ConfigSnapshot, DisplayPreset, clamp_line_height, get_preset, list_presets
from .errors import (
    ASCIIArtError,
    EmptyRamp,
    InvalidDimensions,
    MalformedBuffer,
    NoImageLoaded,
    UnknownRamp,
)
from .image import SourceImage
from .mapper import RenderResult, render
from .pipeline import ConversionSession, convert, image_to_ascii
from .ramps import RampConfig, effective_ramp, get_ramp, list_ramps, preview_ramp
from .scaling import ScaleMode, ScaledImage, ScalingPolicy, scale

__all__ = [
    "ASCIIArtError",
    "ConfigSnapshot",
    "ConversionSession",
    "DisplayPreset",
    "EmptyRamp",
    "InvalidDimensions",
    "MalformedBuffer",
    "NoImageLoaded",
    "RampConfig",
    "RenderResult",
    "ScaleMode",
    "ScaledImage",
    "ScalingPolicy",
    "SourceImage",
    "UnknownRamp",
    "clamp_line_height",
    "convert",
    "effective_ramp",
    "get_preset",
    "get_ramp",
    "image_to_ascii",
    "list_presets",
    "list_ramps",
    "preview_ramp",
    "render",
    "scale",
]
