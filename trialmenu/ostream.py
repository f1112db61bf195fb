"""Line feeds, split lines and tabs for console output."""

import sys

LINEFEED = "\n"
LINEFEED2 = LINEFEED * 2
LINEFEED3 = LINEFEED * 3

SPLIT = LINEFEED + "=" * 68 + LINEFEED + LINEFEED
SOFTSPLIT = LINEFEED + "    " + "-" * 60 + LINEFEED + LINEFEED

TAB = "\t"
TAB2 = TAB * 2
TAB3 = TAB * 3
TAB4 = TAB * 4


def _write(text: str) -> None:
    sys.stdout.write(text)


def lf() -> None:
    """Write one line feed."""
    _write(LINEFEED)


def lf2() -> None:
    """Write two line feeds."""
    _write(LINEFEED2)


def lf3() -> None:
    """Write three line feeds."""
    _write(LINEFEED3)


def ss() -> None:
    """Write a soft (dashed, indented) split line."""
    _write(SOFTSPLIT)


def ls() -> None:
    """Write a hard split line."""
    _write(SPLIT)