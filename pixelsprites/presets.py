"""Named mask + parameter combinations used by the demo scene and the CLI."""

from typing import Dict, NamedTuple

from .config import GeneratorConfig
from .generator import PixelSpriteGenerator
from .masks import load_builtin


class Preset(NamedTuple):
    mask: str
    mirror_x: bool
    mirror_y: bool
    config: GeneratorConfig


PRESETS: Dict[str, Preset] = {
    "robot": Preset("robot", True, False, GeneratorConfig(scale=8, foreground_color=(0.0, 0.0, 1.0, 1.0))),
    "ship": Preset("ship", True, False, GeneratorConfig(scale=8)),
    "dragon": Preset("dragon", False, False, GeneratorConfig(scale=8)),
    "ship_low_saturation": Preset("ship", True, False, GeneratorConfig(saturation=0.1, scale=8)),
    "ship_colorful": Preset("ship", True, False, GeneratorConfig(color_variations=0.9, saturation=0.8, scale=8)),
}


def preset_generator(name: str, **overrides) -> PixelSpriteGenerator:
    """Build a generator for a preset, with optional config overrides."""
    try:
        preset = PRESETS[name]
    except KeyError:
        raise KeyError(f"unknown preset {name!r} (choose from {', '.join(sorted(PRESETS))})") from None
    mask = load_builtin(preset.mask, preset.mirror_x, preset.mirror_y)
    return PixelSpriteGenerator(mask, preset.config, **overrides)
