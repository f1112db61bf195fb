"""Keyboard-driven console menus for running and inspecting code trials."""

__version__ = "1.7.1"

__all__ = [
    "binary",
    "colors",
    "director",
    "inspector",
    "menu",
    "ostream",
    "printfile",
    "version",
]