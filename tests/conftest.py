"""Shared test fixtures."""

import random

import pytest

from pixelsprites import Mask

SHIP = [
    [0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 1, 1],
    [0, 0, 0, 0, 1, -1],
    [0, 0, 0, 1, 1, -1],
    [0, 0, 0, 1, 1, -1],
    [0, 0, 1, 1, 1, -1],
    [0, 1, 1, 1, 2, 2],
    [0, 1, 1, 1, 2, 2],
    [0, 1, 1, 1, 2, 2],
    [0, 1, 1, 1, 1, -1],
    [0, 0, 0, 1, 1, 1],
    [0, 0, 0, 0, 0, 0],
]

# odd width and height on purpose
BLOB = [
    [0, 1, 2],
    [1, 2, -1],
    [2, 1, 0],
]


class ScriptedRandom(random.Random):
    """Random stream that returns prescribed values from ``random()``."""

    def __init__(self, values=()):
        super().__init__(0)
        self.values = list(values)
        self.draws = 0

    def random(self):
        if not self.values:
            raise AssertionError("random stream exhausted")
        self.draws += 1
        return self.values.pop(0)


@pytest.fixture
def ship_mask() -> Mask:
    return Mask.from_array(SHIP, mirror_x=True)


@pytest.fixture
def blob_mask() -> Mask:
    return Mask.from_array(BLOB, mirror_x=True, mirror_y=True)


@pytest.fixture
def scripted():
    return ScriptedRandom
