import io
import sys

import pytest

from trialmenu.director import Director, read_key
from trialmenu.menu import LeaveAction, Menu


class SimpleMenu(Menu):
    def __init__(self, name, description="", fill=None):
        self.name = name
        self.text = description
        self.fill = fill or (lambda processor: None)

    def title(self):
        return self.name

    def description(self):
        return self.text

    def write(self, processor):
        self.fill(processor)


class Recorder:
    def __init__(self, keys):
        self.keys = iter(keys)
        self.clears = 0
        self.pauses = 0

    def read_key(self):
        return next(self.keys)

    def clear(self):
        self.clears += 1

    def pause(self):
        self.pauses += 1


def make_director(keys):
    recorder = Recorder(keys)
    director = Director(recorder.read_key, recorder.clear, recorder.pause)
    return director, recorder


def test_exit_key_ends_run():
    director, recorder = make_director([27])
    director.setup(SimpleMenu("Root", fill=lambda p: p.add_exit(27)))
    director.run()
    assert recorder.pauses == 0
    assert recorder.clears == 2


def test_pause_after_pause_action(capsys):
    def fill(p):
        p.add_item("a", "Alpha", lambda: LeaveAction.PAUSE)
        p.add_exit(27)

    director, recorder = make_director([ord("a"), 27])
    director.setup(SimpleMenu("Root", fill=fill))
    director.run()
    assert recorder.pauses == 1
    assert "# Alpha #\n" in capsys.readouterr().out


def test_none_action_does_not_pause():
    def fill(p):
        p.add_item("n", "Nothing", lambda: LeaveAction.NONE)
        p.add_exit(27)

    director, recorder = make_director([ord("n"), ord("n"), 27])
    director.setup(SimpleMenu("Root", fill=fill))
    director.run()
    assert recorder.pauses == 0


def test_unknown_key_pauses(capsys):
    director, recorder = make_director([ord("?"), 27])
    director.setup(SimpleMenu("Root", fill=lambda p: p.add_exit(27)))
    director.run()
    assert recorder.pauses == 1
    assert "# Item Not Found #" in capsys.readouterr().out


def test_submenu_navigation(capsys):
    sub = SimpleMenu("Another Menu", "Sub text", fill=lambda p: p.add_exit("e"))
    root = SimpleMenu("Root Menu", fill=lambda p: p.add_menu("s", sub))
    director, recorder = make_director([ord("s"), ord("e")])
    director.setup(root)
    director.run()
    out = capsys.readouterr().out
    assert "# Root Menu #" in out
    assert "# Another Menu #" in out
    assert "Sub text" in out
    assert recorder.pauses == 0


def test_menu_shown_before_each_key(capsys):
    director, _ = make_director([ord("x"), 27])
    director.setup(SimpleMenu("Root Menu", fill=lambda p: p.add_exit(27)))
    director.run()
    assert capsys.readouterr().out.count("Select Menu") == 2


def test_read_key_from_piped_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("q"))
    assert read_key() == ord("q")


def test_read_key_end_of_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(EOFError):
        read_key()