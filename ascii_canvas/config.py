"""
Conversion Settings

ConfigSnapshot captures every setting that affects a render. Snapshots are
immutable; changing a setting produces a new snapshot.

Display presets bundle the values behind the "pastebin" and "wykop" buttons:
a cosmetic line height for the host plus manual-width scaling settings.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Mapping, Optional

from .ramps import DEFAULT_RAMP, RampConfig, get_ramp, preview_ramp
from .scaling import DEFAULT_VERTICAL_STRETCH, ScaleMode, ScalingPolicy


MIN_LINE_HEIGHT = 1


@dataclass(frozen=True)
class DisplayPreset:
    """Named bundle of display and scaling values for a target site."""
    name: str
    line_height: int           # px, applied by the host
    manual_width: int
    vertical_stretch: float
    css_class: str


PRESETS: Dict[str, DisplayPreset] = {
    "pastebin": DisplayPreset(
        name="pastebin",
        line_height=21,
        manual_width=135,
        vertical_stretch=0.35,
        css_class="pastebin-output",
    ),
    "wykop": DisplayPreset(
        name="wykop",
        line_height=20,
        manual_width=87,
        vertical_stretch=0.35,
        css_class="wykop-output",
    ),
}


def get_preset(name: str) -> DisplayPreset:
    """Get a display preset by name."""
    if name not in PRESETS:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return PRESETS[name]


def list_presets() -> List[str]:
    return list(PRESETS.keys())


def clamp_line_height(value) -> int:
    """Line heights below 1px are raised to 1."""
    return max(MIN_LINE_HEIGHT, int(value))


@dataclass(frozen=True)
class ConfigSnapshot:
    """
    Settings for a single render.

    Attributes:
        scale_mode: Pixel perfect, auto or manual
        manual_width: Requested width for manual mode (validated at scale time)
        vertical_stretch: Height multiplier for auto/manual modes
        ramp_key: Name of the glyph ramp
        negative: Reverse the ramp
    """
    scale_mode: ScaleMode = ScaleMode.AUTO
    manual_width: Optional[Any] = None
    vertical_stretch: float = DEFAULT_VERTICAL_STRETCH
    ramp_key: str = DEFAULT_RAMP
    negative: bool = False

    def __post_init__(self):
        object.__setattr__(self, "scale_mode", ScaleMode.parse(self.scale_mode))
        object.__setattr__(self, "vertical_stretch", float(self.vertical_stretch))
        object.__setattr__(self, "ramp_key", str(self.ramp_key))
        object.__setattr__(self, "negative", _as_bool(self.negative))

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ConfigSnapshot":
        """
        Build from loose host values, e.g. form fields.

        Unknown keys are ignored; missing keys keep their defaults.
        """
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in values.items() if k in names and v is not None})

    def replace(self, **changes) -> "ConfigSnapshot":
        return replace(self, **changes)

    def with_preset(self, name: str) -> "ConfigSnapshot":
        """Apply a display preset's scaling values (switches to manual mode)."""
        preset = get_preset(name)
        return replace(
            self,
            scale_mode=ScaleMode.MANUAL,
            manual_width=preset.manual_width,
            vertical_stretch=preset.vertical_stretch,
        )

    def to_policy(self) -> ScalingPolicy:
        return ScalingPolicy(
            mode=self.scale_mode,
            requested_width=self.manual_width,
            vertical_stretch=self.vertical_stretch,
        )

    def ramp(self) -> RampConfig:
        return get_ramp(self.ramp_key, self.negative)

    def preview(self) -> str:
        return preview_ramp(self.ramp_key, self.negative)


def _as_bool(value) -> bool:
    # Checkbox values arrive as strings from some hosts
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)
