# trialmenu

A small toolkit for building keyboard-driven console menus that run
self-contained code trials. It also has helpers for printing what a
trial does: expectations, values, binary dumps and file excerpts.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a menu

A menu is a subclass of `trialmenu.menu.Menu`. It supplies a title, a
description and a `write` method that fills a `MenuProcessor` with
entries. A `Director` shows the menu and reads one key at a time:

```python
from trialmenu.director import Director
from trialmenu.menu import LeaveAction, Menu, MenuProcessor


class MyMenu(Menu):
    def title(self):
        return "My Trials"

    def description(self):
        return ""

    def write(self, processor: MenuProcessor):
        processor.add_message("# Basics")
        processor.add_item("1", "Say hello", self._hello)
        processor.add_split()
        processor.add_exit(27)

    def _hello(self):
        print("hello")
        return LeaveAction.PAUSE


director = Director()
director.setup(MyMenu())
director.run()
```

Each action returns a `LeaveAction`:

- `NONE` goes straight back to the menu.
- `PAUSE` waits for a key first.
- `EXIT` ends `Director.run`.

`MenuProcessor` offers these methods for building a menu:

- `add_item(key, title, action, message_color, background_color)` binds a function to a key.
- `add_entry(key, item)` binds an `Item` (an object with `title()` and `run()`) to a key.
- `add_menu(key, menu)` switches to another `Menu`.
- `add_exit(key)` adds an entry that returns `LeaveAction.EXIT`.
- `add_message`, `add_line_feed` and `add_split` lay out the listing.

A key is either a single character or an integer code. The codes 27 and 32
are shown as `ESC` and `SPACE`.

`Director` takes optional `read_key`, `clear_screen` and `pause` callables,
so a menu can be driven from something other than the keyboard. By default
it reads single key presses with `trialmenu.director.read_key` and clears the
screen with an ANSI escape sequence.

## Inspecting code inside a trial

`trialmenu.inspector` prints coloured, labelled lines:

```python
from trialmenu import inspector

inspector.expect_eq(255 * 2 * 2, 1020, "255 * 2 * 2", "1020")
inspector.output_value(11111 * 7, "11111 * 7")
inspector.output_binary((123).to_bytes(4, "little"), "123")
inspector.output_file_range("notes.txt", 1, 3)
```

The `expect_*` functions return whether the check passed. When a check
fails, they also print both values.

## Other modules

- `trialmenu.colors`: ANSI colour codes (`Color`) and `ColorModifier`, which renders as an escape sequence.
- `trialmenu.ostream`: separator strings, plus `lf`, `lf2`, `lf3`, `ls` and `ss` to write them.
- `trialmenu.binary`: bit-level formatting of bytes (`format_binary`, `format_binaries`, `byte_bits`).
- `trialmenu.printfile`: numbered file listings (`format_file`, `print_file`).
- `trialmenu.version`: `VersionInfo`, which holds the version number, the version rule and the roadmap text.

## What it does not do

The package installs no command and ships no ready-made menu. You write
your own `Menu` and start it with `Director`. It has no helpers for
controlling the console window or cursor, and none for measuring CPU cache
effects. Apart from clearing the screen with an escape sequence, all output
is plain text written to the terminal.