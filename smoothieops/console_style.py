# smoothieops/console_style.py
"""Codes ANSI pour le texte de la simulation (titres, erreurs, fin de mixage)."""

_RESET = "\033[0m"

ANSI_CODES = {
    "bold": "\033[1m",
    "green": "\033[92m",
    "red": "\033[91m",
    "yellow": "\033[93m",
}


def colorize(text: str, style: str) -> str:
    """Entoure ``text`` du code ``style`` ; lève KeyError si le style est inconnu."""
    return f"{ANSI_CODES[style]}{text}{_RESET}"


def bold(text: str) -> str:
    return colorize(text, "bold")


def green(text: str) -> str:
    return colorize(text, "green")


def red(text: str) -> str:
    return colorize(text, "red")


def yellow(text: str) -> str:
    return colorize(text, "yellow")
