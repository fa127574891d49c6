"""Exception types raised by the sprite pipeline."""

from typing import Optional


class SpriteError(Exception):
    """Base class for every error raised by pixelsprites."""


class ParseError(SpriteError, ValueError):
    """A mask source could not be turned into a valid grid."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class ConfigError(SpriteError, ValueError):
    """A generation parameter is out of range."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")
