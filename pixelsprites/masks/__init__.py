"""Masks bundled with the package, stored as CSV files next to this module."""

from importlib import resources
from typing import List

from ..mask import Mask


def available() -> List[str]:
    return sorted(
        entry.name[: -len(".csv")]
        for entry in resources.files(__name__).iterdir()
        if entry.name.endswith(".csv")
    )


def load_builtin(name: str, mirror_x: bool = False, mirror_y: bool = False) -> Mask:
    """Load a bundled mask by name, e.g. ``load_builtin("ship", mirror_x=True)``."""
    if name not in available():
        raise KeyError(f"no built-in mask named {name!r} (choose from {', '.join(available())})")
    text = resources.files(__name__).joinpath(f"{name}.csv").read_text(encoding="utf-8")
    return Mask.from_source(text, mirror_x, mirror_y)
