"""
Tests for the fruit factory.

All unknown names raise UnknownIngredientError carrying the original input.
"""

import pytest

from smoothieops.domain.types import FruitKind
from smoothieops.exceptions import SmoothieError, UnknownIngredientError
from smoothieops.rules.fruit_factory import available_fruits, create_fruit


class TestCreateFruit:
    """Test name to fruit dispatch."""

    @pytest.mark.parametrize(
        "raw_name, expected_name",
        [
            ("strawberry", "Strawberry"),
            ("cherry", "Cherry"),
            ("mango", "Mango"),
            ("raspberry", "Raspberry"),
            ("STRAWBERRY", "Strawberry"),
            ("Cherry", "Cherry"),
            ("mAnGo", "Mango"),
        ],
    )
    def test_known_names(self, raw_name, expected_name):
        fruit = create_fruit(raw_name)
        assert fruit.name == expected_name
        assert fruit.prepare()

    def test_kind_matches_key(self):
        assert create_fruit("Raspberry").kind is FruitKind.RASPBERRY

    def test_each_call_returns_a_fresh_instance(self):
        assert create_fruit("mango") is not create_fruit("mango")

    @pytest.mark.parametrize("raw_name", ["banana", "", "STRAWBERRY!", " mango", "kiwi"])
    def test_unknown_names_raise(self, raw_name):
        with pytest.raises(UnknownIngredientError) as exc:
            create_fruit(raw_name)
        assert exc.value.raw_name == raw_name

    def test_error_message_keeps_original_case(self):
        with pytest.raises(UnknownIngredientError) as exc:
            create_fruit("KiWi")
        assert str(exc.value) == "Sorry, we don't have KiWi for the smoothie."

    def test_error_hierarchy(self):
        with pytest.raises(SmoothieError):
            create_fruit("banana")
        with pytest.raises(ValueError):
            create_fruit("banana")


def test_available_fruits():
    assert available_fruits() == ["strawberry", "cherry", "mango", "raspberry"]
