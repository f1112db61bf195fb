"""Labelled, coloured console output for checks, steps and values."""

import operator
import sys
from typing import Any, Callable, Optional

from trialmenu.binary import format_binaries, format_binary
from trialmenu.printfile import print_file

_RESET = "\033[0m"
_GRAY = "\x1b[90m"
_PASS_GREEN = "\x1b[92m"
_PASS_BLUE = "\x1b[94m"
_FAIL_RED = "\x1b[91m"
_PROCESS = "\x1b[96m"
_DECLARATION = "\x1b[93m"


def _write(text: str) -> None:
    sys.stdout.write(text)


def _label(value: Any, text: Optional[str]) -> str:
    return repr(value) if text is None else text


def _report(passed: bool, pass_color: str, description: str) -> bool:
    if passed:
        _write(f"{pass_color}[PASS]{_RESET} {description}\n")
    else:
        _write(f"{_FAIL_RED}[FAILED]{_RESET} {description}\n")
    return passed


def _compare(
    name: str,
    symbol: str,
    check: Callable[[Any, Any], bool],
    pass_color: str,
    left: Any,
    right: Any,
    left_text: Optional[str],
    right_text: Optional[str],
) -> bool:
    left_label = _label(left, left_text)
    right_label = _label(right, right_text)
    passed = bool(check(left, right))
    _report(passed, pass_color, f"{name}( {left_label} {symbol} {right_label} )")
    if not passed:
        output_value(left, f"( {left_label} )")
        output_value(right, f"( {right_label} )")
    return passed


def expect_true(condition: Any, text: Optional[str] = None) -> bool:
    """Report whether ``condition`` is truthy; return the outcome."""
    description = f"EXPECT_TRUE( {_label(condition, text)} )"
    return _report(bool(condition), _PASS_GREEN, description)


def expect_false(condition: Any, text: Optional[str] = None) -> bool:
    """Report whether ``condition`` is falsy; return the outcome."""
    description = f"EXPECT_FALSE( {_label(condition, text)} )"
    return _report(not condition, _PASS_BLUE, description)


def expect_eq(left, right, left_text=None, right_text=None) -> bool:
    """Report ``left == right``; print both values on failure."""
    return _compare("EXPECT_EQ", "==", operator.eq, _PASS_GREEN,
                    left, right, left_text, right_text)


def expect_ne(left, right, left_text=None, right_text=None) -> bool:
    """Report ``left != right``; print both values on failure."""
    return _compare("EXPECT_NE", "!=", operator.ne, _PASS_BLUE,
                    left, right, left_text, right_text)


def expect_gt(left, right, left_text=None, right_text=None) -> bool:
    """Report ``left > right``; print both values on failure."""
    return _compare("EXPECT_GT", ">", operator.gt, _PASS_GREEN,
                    left, right, left_text, right_text)


def expect_lt(left, right, left_text=None, right_text=None) -> bool:
    """Report ``left < right``; print both values on failure."""
    return _compare("EXPECT_LT", "<", operator.lt, _PASS_GREEN,
                    left, right, left_text, right_text)


def expect_ge(left, right, left_text=None, right_text=None) -> bool:
    """Report ``left >= right``; print both values on failure."""
    return _compare("EXPECT_GE", ">=", operator.ge, _PASS_GREEN,
                    left, right, left_text, right_text)


def expect_le(left, right, left_text=None, right_text=None) -> bool:
    """Report ``left <= right``; print both values on failure."""
    return _compare("EXPECT_LE", "<=", operator.le, _PASS_GREEN,
                    left, right, left_text, right_text)


def process_main(action: Callable[[], Any], text: str) -> Any:
    """Announce an important step, run ``action`` and return its result."""
    _write(f"{_PROCESS}[PROCESS]{_RESET} {text}\n")
    return action()


def process_sub(action: Callable[[], Any], text: str) -> Any:
    """Announce a minor step in gray, run ``action`` and return its result."""
    _write(f"{_GRAY}[PROCESS] {text}{_RESET}\n")
    return action()


def declaration_main(text: str) -> None:
    """Announce an important declaration."""
    _write(f"{_DECLARATION}[DECLARATION]{_RESET} {text}\n")


def declaration_sub(text: str) -> None:
    """Announce a minor declaration in gray."""
    _write(f"{_GRAY}[DECLARATION] {text}{_RESET}\n")


def output_value(value: Any, text: Optional[str] = None) -> None:
    """Print a labelled value."""
    _write(f"[VALUE] {_label(value, text)}\n\t> {value}\n")


def output_binary(data, text: str) -> None:
    """Print the bits of one value's memory bytes."""
    _write(f"[BINARY] {text}{format_binary(data)}\n")


def output_binaries(data, item_size: int, text: str) -> None:
    """Print the bits of an array of ``item_size``-byte values."""
    rendered = format_binaries(data, item_size)
    count = len(bytes(data)) // item_size
    _write(f"[BINARIES] {text}, {count}{rendered}\n")


def output_code(text: str) -> None:
    """Print a line of code in gray."""
    _write(f"[CODE]{_GRAY} {text}{_RESET}\n")


def output_size(size: int, text: str) -> None:
    """Print a labelled size in bytes."""
    if size < 0:
        raise ValueError("size must not be negative")
    _write(f"[SIZE] {text}\n\t> {size} byte\n")


def output_string(text: str) -> None:
    """Print plain text on its own line."""
    _write(f"{text}\n")


def output_note(text: str) -> None:
    """Print an indented red note."""
    _write(f"\t{_FAIL_RED}[ NOTE ] {text}{_RESET}\n")


def output_subject(text: str) -> None:
    """Print an indented green subject heading."""
    _write(f"\t{_PASS_GREEN}+ {text}{_RESET}\n")


def output_comment(text: str) -> None:
    """Print an indented yellow comment."""
    _write(f"\t{_DECLARATION}> {text}{_RESET}\n")


def output_file(path) -> None:
    """Print a numbered listing of the whole file."""
    print_file(path)


def output_file_range(path, first: int, last: int) -> None:
    """Print a numbered listing of lines ``first`` to ``last``."""
    print_file(path, first, last)