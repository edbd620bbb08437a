"""Pytest configuration and fixtures for the smoothie simulation tests."""

import pytest

from smoothieops.core.blender import Blender
from smoothieops.domain.fruits import Fruit
from smoothieops.domain.types import FruitKind


class RecordingSleep:
    """Stand-in for time.sleep that records the requested durations."""

    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def blender(recording_sleep):
    """Provide a fresh blender that never actually waits."""
    return Blender(blend_seconds=0, sleep=recording_sleep)


@pytest.fixture
def strawberry():
    return Fruit.from_kind(FruitKind.STRAWBERRY)


@pytest.fixture
def cherry():
    return Fruit.from_kind(FruitKind.CHERRY)


@pytest.fixture
def mango():
    return Fruit.from_kind(FruitKind.MANGO)


@pytest.fixture
def raspberry():
    return Fruit.from_kind(FruitKind.RASPBERRY)
