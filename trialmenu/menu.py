"""Keyed menu entries, menus and the processor that shows and runs them."""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional, TextIO, Union

from trialmenu.colors import Color, ColorModifier
from trialmenu.ostream import LINEFEED, LINEFEED2, SPLIT

KEY_LINEFEED = ord("@")
KEY_SPLIT = ord("*")
KEY_MESSAGE = ord("(")
KEY_ESCAPE = 27
KEY_SPACE = 32

Key = Union[str, int]
TitleFunction = Callable[[], str]
DescriptionFunction = Callable[[], str]


class LeaveAction(Enum):
    """What the director does after an entry has run."""

    NONE = auto()
    PAUSE = auto()
    EXIT = auto()


ActionFunction = Callable[[], LeaveAction]


class Item(ABC):
    """A runnable entry with a title."""

    @abstractmethod
    def title(self) -> str:
        """Return the entry's title."""

    @abstractmethod
    def run(self) -> LeaveAction:
        """Do the entry's work and say what should happen next."""


class Menu(ABC):
    """A titled page of entries."""

    @abstractmethod
    def title(self) -> str:
        """Return the menu's title."""

    @abstractmethod
    def description(self) -> str:
        """Return the text shown under the title; empty for none."""

    @abstractmethod
    def write(self, processor: "MenuProcessor") -> None:
        """Add this menu's entries to ``processor``."""


@dataclass(frozen=True)
class _Entry:
    key_code: int
    message_color: int
    background_color: int
    title: TitleFunction
    action: ActionFunction


def _key_code(key: Key) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"a key must be a single character: {key!r}")
        return ord(key)
    if isinstance(key, int):
        if key < 0:
            raise ValueError(f"key code must not be negative: {key}")
        return key
    raise TypeError(f"a key must be a character or an integer code, not {type(key).__name__}")


def _title_function(title: Union[str, TitleFunction]) -> TitleFunction:
    if isinstance(title, str):
        return lambda: title
    return title


def _blank_title() -> str:
    return ""


def _pause() -> LeaveAction:
    return LeaveAction.PAUSE


def _exit_title() -> str:
    return "Exit"


def _exit() -> LeaveAction:
    return LeaveAction.EXIT


def _key_label(key_code: int) -> str:
    if key_code == KEY_ESCAPE:
        return "ESC"
    if key_code == KEY_SPACE:
        return "SPACE"
    return chr(key_code).upper()


class MenuProcessor:
    """Holds the current menu's entries, renders them and runs the chosen one."""

    def __init__(self, out: Optional[TextIO] = None):
        self._out = out
        self._title = ""
        self._description = ""
        self._entries: List[_Entry] = []

    @property
    def _stream(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._stream.write(text)

    def _colored(self, entry: _Entry) -> str:
        return (
            f"{ColorModifier(entry.message_color)}"
            f"{ColorModifier(entry.background_color)}"
            f"{entry.title()}"
            f"{ColorModifier()}"
            f"{LINEFEED}"
        )

    def show_title(self) -> None:
        """Write the menu title followed by a split line."""
        self._write(f"# {self._title} #{LINEFEED}")
        self._write(SPLIT)

    def show_description(self) -> None:
        """Write the description in light green, if there is one."""
        if self._description:
            self._write(
                f"{ColorModifier(Color.FG_LIGHT_GREEN)}{self._description}"
                f"{ColorModifier()}{LINEFEED}"
            )
            self._write(SPLIT)

    def show_items(self) -> None:
        """Write every entry with its key, then the selection prompt."""
        self._write(f"+ Menu{LINEFEED2}")
        for entry in self._entries:
            if entry.key_code == KEY_SPLIT:
                self._write(SPLIT)
            elif entry.key_code == KEY_LINEFEED:
                self._write(LINEFEED)
            elif entry.key_code == KEY_MESSAGE:
                self._write(self._colored(entry))
            else:
                self._write(f"[{_key_label(entry.key_code)}] ")
                self._write(self._colored(entry))
        self._write(SPLIT + "Select Menu")

    def do(self, key_code: Key) -> LeaveAction:
        """Run the first entry bound to ``key_code`` and return its leave action."""
        code = _key_code(key_code)
        entry = next((e for e in self._entries if e.key_code == code), None)
        if entry is None:
            self._write(f"# Item Not Found #{LINEFEED2}")
            return LeaveAction.PAUSE
        self._write(f"# {entry.title()} #{LINEFEED}")
        # The action may reset this processor, so only the local reference is used.
        action = entry.action
        return action()

    def reset(
        self,
        title_function: TitleFunction,
        description_function: DescriptionFunction,
        write_function: Callable[["MenuProcessor"], None],
    ) -> None:
        """Replace the current menu with the one the three functions describe."""
        self._title = title_function()
        self._description = description_function()
        self._entries.clear()
        write_function(self)

    def add_item(
        self,
        key_code: Key,
        title: Union[str, TitleFunction],
        action: ActionFunction,
        message_color: int = Color.FG_WHITE,
        background_color: int = Color.BG_BLACK,
    ) -> None:
        """Bind ``action`` to ``key_code`` under the given title and colours."""
        self._entries.append(
            _Entry(
                _key_code(key_code),
                int(message_color),
                int(background_color),
                _title_function(title),
                action,
            )
        )

    def add_entry(self, key_code: Key, item: Item) -> None:
        """Bind an :class:`Item` to ``key_code``."""
        self.add_item(key_code, item.title, item.run, Color.FG_WHITE, Color.BG_BLACK)

    def add_exit(
        self,
        key_code: Key,
        message_color: int = Color.FG_WHITE,
        background_color: int = Color.BG_PURPLE,
    ) -> None:
        """Bind an "Exit" entry that ends the director's loop."""
        self.add_item(key_code, _exit_title, _exit, message_color, background_color)

    def add_menu(self, key_code: Key, menu: Menu) -> None:
        """Bind an entry that switches this processor to ``menu``."""
        title_function = menu.title
        description_function = menu.description
        write_function = menu.write

        def switch() -> LeaveAction:
            self.reset(title_function, description_function, write_function)
            return LeaveAction.NONE

        self.add_item(key_code, title_function, switch, Color.FG_AQUA, Color.BG_BLACK)

    def add_line_feed(self) -> None:
        """Add an empty line to the listing."""
        self.add_item(KEY_LINEFEED, _blank_title, _pause, Color.FG_WHITE, Color.BG_BLACK)

    def add_split(self) -> None:
        """Add a split line to the listing."""
        self.add_item(KEY_SPLIT, _blank_title, _pause, Color.FG_WHITE, Color.BG_BLACK)

    def add_message(
        self,
        message: str,
        message_color: int = Color.FG_WHITE,
        background_color: int = Color.BG_BLACK,
    ) -> None:
        """Add a coloured line of text to the listing."""
        self.add_item(KEY_MESSAGE, lambda: message, _pause, message_color, background_color)