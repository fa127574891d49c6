"""Generate pixel art sprites from a mask and save them as PNG files.

Usage:
    gen-sprite --preset ship --count 10 --out sprites/
    gen-sprite --mask masks/robot.csv --mirror-x --scale 8 --seed 42
    gen-sprite --preset dragon --count 20 --sheet --columns 5
"""

import argparse
import logging
import os
import random
import sys

from .config import parse_color
from .errors import SpriteError
from .generator import PixelSpriteGenerator
from .mask import Mask
from .presets import PRESETS, preset_generator
from .sheet import compose_sheet

logger = logging.getLogger(__name__)


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Procedural pixel sprite generator")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--preset", choices=sorted(PRESETS), default=None, help="Built-in mask and parameters")
    source.add_argument("--mask", default=None, help="CSV mask file")
    parser.add_argument("--mirror-x", action="store_true", help="Mirror a --mask file horizontally")
    parser.add_argument("--mirror-y", action="store_true", help="Mirror a --mask file vertically")
    parser.add_argument("--count", type=positive_int, default=5, help="Number of sprites to generate")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--out", default="sprites/", help="Output directory")
    parser.add_argument("--scale", type=int, default=None, help="Pixel block size per mask cell")
    parser.add_argument("--saturation", type=float, default=None)
    parser.add_argument("--color-variations", type=float, default=None)
    parser.add_argument("--brightness-noise", type=float, default=None)
    parser.add_argument("--edge-brightness", type=float, default=None)
    parser.add_argument("--no-color", action="store_true", help="Black outlines only")
    parser.add_argument("--foreground", default=None, help="Fixed fill color, #rrggbb[aa]")
    parser.add_argument("--background", default=None, help="Background color, #rrggbb[aa]")
    parser.add_argument("--sheet", action="store_true", help="Also write all sprites into sheet.png")
    parser.add_argument("--columns", type=positive_int, default=10, help="Sprites per sheet row")
    parser.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"])
    return parser


def _overrides(args) -> dict:
    overrides = {}
    for name in ("scale", "saturation", "color_variations", "brightness_noise", "edge_brightness"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    if args.no_color:
        overrides["is_colored"] = False
    if args.foreground is not None:
        overrides["foreground_color"] = parse_color(args.foreground, "foreground_color")
    if args.background is not None:
        overrides["background_color"] = parse_color(args.background, "background_color")
    return overrides


def _make_generator(args) -> PixelSpriteGenerator:
    overrides = _overrides(args)
    if args.mask is not None:
        mask = Mask.from_file(args.mask, mirror_x=args.mirror_x, mirror_y=args.mirror_y)
        return PixelSpriteGenerator(mask, **overrides)
    return preset_generator(args.preset or "ship", **overrides)


def run(args) -> int:
    generator = _make_generator(args)
    name = os.path.splitext(os.path.basename(args.mask))[0] if args.mask else (args.preset or "ship")
    rng = random.Random(args.seed)

    os.makedirs(args.out, exist_ok=True)
    print(f"Generating {args.count} {name} sprites (scale={generator.config.scale})")

    sprites = []
    for i in range(args.count):
        sprite = generator.create_sprite(rng=rng)
        sprites.append(sprite)

        filename = f"{name}_{i:03d}.png"
        filepath = os.path.join(args.out, filename)
        sprite.save(filepath)
        size_kb = os.path.getsize(filepath) / 1024
        print(f"  {filename} {sprite.width}x{sprite.height} ({size_kb:.1f}KB)")

    if args.sheet and sprites:
        sheet_path = os.path.join(args.out, f"{name}_sheet.png")
        compose_sheet(sprites, columns=args.columns).save(sheet_path)
        print(f"  sheet -> {sheet_path}")

    print(f"\nDone. {args.count} sprites saved to {args.out}")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return run(args)
    except (SpriteError, OSError) as e:
        logger.info("Generation aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
