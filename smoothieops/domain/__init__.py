"""
Domain objects for SmoothieOps.

The domain layer holds the fruit variants and their catalog.  Fruits are
immutable pydantic models so they can be handed around freely.
"""

from .fruits import Fruit, FruitSpec
from .types import FruitKind

__all__ = ["Fruit", "FruitKind", "FruitSpec"]
