"""Procedural pixel art sprites from structural masks."""

from .config import GeneratorConfig, parse_color
from .errors import ConfigError, ParseError, SpriteError
from .generator import PixelSpriteGenerator, generate_grid, generate_sprite
from .mask import Mask
from .masks import load_builtin
from .render import Sprite

__all__ = [
    "ConfigError",
    "GeneratorConfig",
    "Mask",
    "ParseError",
    "PixelSpriteGenerator",
    "Sprite",
    "SpriteError",
    "generate_grid",
    "generate_sprite",
    "load_builtin",
    "parse_color",
]

__version__ = "0.1.0"
