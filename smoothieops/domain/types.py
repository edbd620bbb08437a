# smoothieops/domain/types.py
from enum import Enum


class FruitKind(Enum):
    # Values are the lowercase lookup keys used by the factory and the JSON catalog
    STRAWBERRY = "strawberry"
    CHERRY = "cherry"
    MANGO = "mango"
    RASPBERRY = "raspberry"
