"""Exception classes for SmoothieOps.

Exception Hierarchy:
    SmoothieError (base)
    └── UnknownIngredientError
"""


class SmoothieError(Exception):
    """Base exception for all smoothie simulation errors."""

    pass


class UnknownIngredientError(SmoothieError, ValueError):
    """Raised when a requested fruit is not in the catalog.

    Args:
        raw_name: The name exactly as it was requested (case preserved)
    """

    def __init__(self, raw_name: str):
        self.raw_name = raw_name
        super().__init__(f"Sorry, we don't have {raw_name} for the smoothie.")
