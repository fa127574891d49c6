"""Lay out several sprites on one image."""

from typing import Sequence, Tuple

from PIL import Image

from .config import RGBA, TRANSPARENT, to_rgba
from .render import Sprite


def compose_sheet(
    sprites: Sequence[Sprite],
    columns: int = 10,
    padding: int = 1,
    background: RGBA = TRANSPARENT,
) -> Image.Image:
    """Paste sprites row by row into a grid of equally sized cells.

    Cells are as large as the largest sprite; smaller sprites are centered.
    """
    if not sprites:
        raise ValueError("no sprites to compose")
    if columns < 1:
        raise ValueError(f"columns must be positive, got {columns}")

    cell_w = max(s.width for s in sprites)
    cell_h = max(s.height for s in sprites)
    rows = (len(sprites) + columns - 1) // columns
    cols = min(columns, len(sprites))

    size = (cols * cell_w + (cols + 1) * padding, rows * cell_h + (rows + 1) * padding)
    fill: Tuple[int, ...] = tuple(int(round(c * 255)) for c in to_rgba(background, "background"))
    sheet = Image.new("RGBA", size, fill)

    for i, sprite in enumerate(sprites):
        row, col = divmod(i, columns)
        x = padding + col * (cell_w + padding) + (cell_w - sprite.width) // 2
        y = padding + row * (cell_h + padding) + (cell_h - sprite.height) // 2
        img = sprite.to_image()
        sheet.paste(img, (x, y), img)
    return sheet
