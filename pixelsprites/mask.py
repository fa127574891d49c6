"""Structural templates that sprites are generated from.

A mask is a small grid of codes describing which parts of a sprite are
empty, body or border. It only defines a semi-rigid structure; the resolver
decides the ambiguous cells from random draws.

    -1 = always border (dark outline)
     0 = always empty
     1 = randomly empty or body
     2 = randomly border or body
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .errors import ParseError

BORDER = -1
EMPTY = 0
BODY = 1
BODY_OR_BORDER = 2

CODES = frozenset({BORDER, EMPTY, BODY, BODY_OR_BORDER})


def _check_code(value, line: Optional[int]) -> int:
    # bool is an int subclass but never a mask code
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ParseError(f"mask values must be integers, got {value!r}", line=line)
    if value not in CODES:
        raise ParseError(f"unknown mask code {value}", line=line)
    return int(value)


def _freeze_rows(rows: Sequence[Sequence[int]]) -> Tuple[Tuple[int, ...], ...]:
    try:
        rows = [list(row) for row in rows]
    except TypeError as e:
        raise ParseError(f"mask rows must be sequences ({e})") from e
    if not rows or not rows[0]:
        raise ParseError("mask must have at least one row and one column")

    width = len(rows[0])
    grid = []
    for i, row in enumerate(rows, start=1):
        if len(row) != width:
            raise ParseError(f"expected {width} values, got {len(row)}", line=i)
        grid.append(tuple(_check_code(value, i) for value in row))
    return tuple(grid)


@dataclass(frozen=True)
class Mask:
    """Immutable 2D template, indexed ``data[row][col]``."""

    data: Tuple[Tuple[int, ...], ...]
    mirror_x: bool = False
    mirror_y: bool = False

    def __post_init__(self):
        object.__setattr__(self, "data", _freeze_rows(self.data))
        object.__setattr__(self, "mirror_x", bool(self.mirror_x))
        object.__setattr__(self, "mirror_y", bool(self.mirror_y))

    @property
    def width(self) -> int:
        return len(self.data[0])

    @property
    def height(self) -> int:
        return len(self.data)

    @property
    def output_size(self) -> Tuple[int, int]:
        """(width, height) of the working grid once mirroring doubles it."""
        return (
            self.width * (2 if self.mirror_x else 1),
            self.height * (2 if self.mirror_y else 1),
        )

    @classmethod
    def from_array(cls, grid: Sequence[Sequence[int]], mirror_x: bool = False, mirror_y: bool = False) -> "Mask":
        return cls(grid, mirror_x, mirror_y)

    @classmethod
    def from_source(cls, text: str, mirror_x: bool = False, mirror_y: bool = False) -> "Mask":
        """Parse comma separated integer rows, one row per line.

        Blank lines are ignored so a trailing newline is harmless.
        """
        rows = []
        width = None
        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            fields = line.split(",")
            try:
                row = [int(field) for field in fields]
            except ValueError:
                bad = next(f for f in fields if not _is_int(f))
                raise ParseError(f"not an integer: {bad.strip()!r}", line=lineno) from None
            if width is None:
                width = len(row)
            elif len(row) != width:
                raise ParseError(f"expected {width} values, got {len(row)}", line=lineno)
            rows.append([_check_code(value, lineno) for value in row])

        if not rows:
            raise ParseError("mask source is empty")
        return cls.from_array(rows, mirror_x, mirror_y)

    @classmethod
    def from_file(cls, path, mirror_x: bool = False, mirror_y: bool = False) -> "Mask":
        # OSError from open() propagates unchanged
        with open(path, encoding="utf-8") as f:
            try:
                text = f.read()
            except UnicodeDecodeError as e:
                raise ParseError(f"mask file is not valid UTF-8 ({e.reason} at byte {e.start})") from e
        return cls.from_source(text, mirror_x, mirror_y)

    def to_source(self) -> str:
        return "".join(",".join(str(v) for v in row) + "\n" for row in self.data)


def _is_int(field: str) -> bool:
    try:
        int(field)
    except ValueError:
        return False
    return True
