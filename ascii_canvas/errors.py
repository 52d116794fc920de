"""
Error Types

All failures raised by the conversion pipeline derive from ASCIIArtError,
so a host can catch the whole family in one place. Each type also derives
from the closest builtin, so plain ``except ValueError`` keeps working.
"""


class ASCIIArtError(Exception):
    """Base class for image-to-ASCII conversion errors."""


class InvalidDimensions(ASCIIArtError, ValueError):
    """Scaling collapsed to a zero/negative width or height."""

    def __init__(self, width, height, message=None):
        self.width = width
        self.height = height
        super().__init__(message or f"Invalid target dimensions: {width}x{height}")


class EmptyRamp(ASCIIArtError, ValueError):
    """The selected ramp has no glyphs to map brightness onto."""

    def __init__(self, ramp_key=None):
        self.ramp_key = ramp_key
        label = f"'{ramp_key}'" if ramp_key is not None else "Selected ramp"
        super().__init__(f"{label} has no glyphs")


class MalformedBuffer(ASCIIArtError, ValueError):
    """Pixel buffer length does not match width * height * 4."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Pixel buffer has {actual} values, expected {expected} (width * height * 4)"
        )


class NoImageLoaded(ASCIIArtError, RuntimeError):
    """A render was requested before any source image was loaded."""

    def __init__(self):
        super().__init__("No image loaded. Load an image before rendering.")


class UnknownRamp(ASCIIArtError, KeyError):
    """Ramp key is not one of the named presets."""

    def __init__(self, ramp_key, available):
        self.ramp_key = ramp_key
        self.available = list(available)
        super().__init__(f"Unknown ramp: {ramp_key}. Available: {self.available}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the readable message.
        return self.args[0]
