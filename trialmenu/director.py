"""Main loop: show the current menu, read a key, run the chosen entry."""

import os
import sys
from typing import Callable, Optional

from trialmenu.menu import LeaveAction, Menu, MenuProcessor

_CLEAR_SEQUENCE = "\033[2J\033[H"
_PAUSE_PROMPT = "Press any key to continue . . . "


def read_key() -> int:
    """Read one key press without waiting for Enter and return its code."""
    stream = sys.stdin
    if not stream.isatty():
        char = stream.read(1)
        if not char:
            raise EOFError("no more input")
        return ord(char)

    if sys.platform == "win32":
        import msvcrt

        return ord(msvcrt.getwch())

    import termios
    import tty

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    if not data:
        raise EOFError("no more input")
    return data[0]


def _clear_screen() -> None:
    sys.stdout.write(_CLEAR_SEQUENCE)
    sys.stdout.flush()


class Director:
    """Runs a menu until an entry asks to exit."""

    def __init__(
        self,
        read_key: Optional[Callable[[], int]] = None,
        clear_screen: Optional[Callable[[], None]] = None,
        pause: Optional[Callable[[], None]] = None,
    ):
        self._read_key = read_key if read_key is not None else globals_read_key
        self._clear_screen = clear_screen if clear_screen is not None else _clear_screen
        self._pause = pause if pause is not None else self._default_pause
        self._processor = MenuProcessor()

    def _default_pause(self) -> None:
        sys.stdout.write(_PAUSE_PROMPT)
        sys.stdout.flush()
        self._read_key()
        sys.stdout.write("\n")

    def setup(self, menu: Menu) -> None:
        """Make ``menu`` the current menu."""
        self._processor.reset(menu.title, menu.description, menu.write)

    def run(self) -> None:
        """Show, read and dispatch until an entry returns ``LeaveAction.EXIT``."""
        while True:
            self._clear_screen()
            self._processor.show_title()
            self._processor.show_description()
            self._processor.show_items()
            sys.stdout.flush()

            key = self._read_key()

            self._clear_screen()
            result = self._processor.do(key)
            if result is LeaveAction.PAUSE:
                self._pause()
            elif result is LeaveAction.EXIT:
                return


globals_read_key = read_key