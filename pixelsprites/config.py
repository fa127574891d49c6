"""Generation parameters."""

import dataclasses
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .errors import ConfigError

RGBA = Tuple[float, float, float, float]

TRANSPARENT: RGBA = (0.0, 0.0, 0.0, 0.0)
BLACK: RGBA = (0.0, 0.0, 0.0, 1.0)


def to_rgba(color: Sequence[float], field: str = "color") -> RGBA:
    """Normalize an RGB or RGBA sequence of floats in [0, 1] to a 4-tuple."""
    try:
        values = tuple(float(c) for c in color)
    except (TypeError, ValueError):
        raise ConfigError(field, f"expected 3 or 4 numbers, got {color!r}") from None
    if len(values) == 3:
        values += (1.0,)
    if len(values) != 4:
        raise ConfigError(field, f"expected 3 or 4 components, got {len(values)}")
    if any(not 0.0 <= c <= 1.0 for c in values):
        raise ConfigError(field, f"components must lie in [0, 1], got {values}")
    return values


def parse_color(text: str, field: str = "color") -> RGBA:
    """Parse ``#rrggbb`` or ``#rrggbbaa`` into an RGBA tuple."""
    hexdigits = text.strip().lstrip("#")
    if len(hexdigits) not in (6, 8):
        raise ConfigError(field, f"expected #rrggbb or #rrggbbaa, got {text!r}")
    try:
        channels = [int(hexdigits[i:i + 2], 16) / 255.0 for i in range(0, len(hexdigits), 2)]
    except ValueError:
        raise ConfigError(field, f"not a hex color: {text!r}") from None
    return to_rgba(channels, field)


@dataclass(frozen=True)
class GeneratorConfig:
    """Aesthetic parameters for one generation call.

    edge_brightness: 1 keeps outlines as bright as the body, 0 makes them black
    color_variations: how often the hue changes along the primary axis
    brightness_noise: how much brightness is perturbed per pixel
    saturation: upper bound for the randomly chosen saturation
    scale: size of the square pixel block drawn for each grid cell
    background_color: color of empty cells
    foreground_color: fixed fill color, or None to use the computed hue
    """

    is_colored: bool = True
    edge_brightness: float = 0.3
    color_variations: float = 0.2
    brightness_noise: float = 0.3
    saturation: float = 0.5
    scale: int = 1
    background_color: RGBA = TRANSPARENT
    foreground_color: Optional[RGBA] = None

    def __post_init__(self):
        # colors may be passed as RGB; store them as RGBA tuples
        object.__setattr__(self, "background_color", to_rgba(self.background_color, "background_color"))
        if self.foreground_color is not None:
            object.__setattr__(self, "foreground_color", to_rgba(self.foreground_color, "foreground_color"))
        self.validate()

    def validate(self) -> "GeneratorConfig":
        for name in ("edge_brightness", "color_variations", "brightness_noise", "saturation"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(name, f"expected a number, got {value!r}")
            if not 0.0 <= value <= 1.0:
                raise ConfigError(name, f"must lie in [0, 1], got {value}")
        if isinstance(self.scale, bool) or not isinstance(self.scale, int):
            raise ConfigError("scale", f"expected an integer, got {self.scale!r}")
        if self.scale < 1:
            raise ConfigError("scale", f"must be positive, got {self.scale}")
        return self

    def replace(self, **changes) -> "GeneratorConfig":
        return dataclasses.replace(self, **changes).validate()
