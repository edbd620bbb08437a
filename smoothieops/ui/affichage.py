from typing import Sequence

from smoothieops.console_style import bold, green, red, yellow
from smoothieops.domain.fruits import Fruit


def _format_seconds(seconds: float) -> str:
    """Affiche 30.0 comme "30" et 0.5 comme "0.5"."""
    return f"{seconds:g}"


def print_welcome(basket: Sequence[str], menu: Sequence[str]) -> None:
    print(bold("Welcome to the SMOOTHIE MAKER!") + "\n")
    print(f"Fruits on the menu: {', '.join(menu)}")
    print(f"Available ingredients to pick from: {list(basket)}\n")


def print_fruit_added(fruit: Fruit) -> None:
    print(f"Adding {fruit.name} to the blender. ({fruit.prepare()})")


def print_fruit_error(message: str) -> None:
    print(red(f"Error: {message}"))


def print_blender_contents(contents: Sequence[Fruit]) -> None:
    print("\nAll selected fruits are now in the blender.")
    names = ", ".join(fruit.name for fruit in contents)
    print(f"Current blender contents: {names}\n")


def print_empty_blender() -> None:
    print(yellow("The blender is empty! Can't make a smoothie without fruits."))


def print_blend_started(seconds: float) -> None:
    print(
        bold(f"\n--- Blender activated! Whirling for {_format_seconds(seconds)} seconds... ---")
    )


def print_blend_report(names: Sequence[str]) -> None:
    """Rapport de fin de mixage : un nom par ligne, dans l'ordre d'ajout."""
    print(green("\n--- Blending complete! ---"))
    print("Your delicious smoothie is ready!")
    print("It contains:")
    for name in names:
        print(f"- {name}")
    print("\nEnjoy your freshly blended masterpiece!\n")


def print_ready_for_next_batch() -> None:
    print("Blender is now clean and empty, ready for the next batch!")
