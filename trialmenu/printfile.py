"""Numbered listing of text files, whole or by line range."""

_GRAY = "\x1b[90m"
_RESET = "\x1b[0m"


def _numbered(number: int, line: str) -> str:
    return f"{number:4d} |  {line}"


def _read_lines(path) -> list:
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        return handle.readlines()


def format_file(path, first=None, last=None) -> str:
    """Return a numbered listing of ``path``.

    With ``first`` and ``last`` only lines in that inclusive range are listed;
    a trailing blank line is added when the range reaches the end of the file.
    """
    if (first is None) != (last is None):
        raise ValueError("first and last must be given together")

    lines = _read_lines(path)
    footer = f"{_GRAY}[/FILE]{_RESET}\n"

    if first is None:
        body = "".join(_numbered(n, line) for n, line in enumerate(lines, 1))
        return f"{_GRAY}[FILE] {path}{_RESET}\n{body}\n{footer}"

    if first < 0 or last < 0:
        raise ValueError("line numbers must not be negative")

    header = f"{_GRAY}[FILE] {path} : {first} ~ {last}{_RESET}\n"
    listed = [
        _numbered(n, line)
        for n, line in enumerate(lines, 1)
        if first <= n and n <= max(last, 1)
    ]
    reached_end = last >= len(lines)
    tail = "\n" if reached_end else ""
    return header + "".join(listed) + tail + footer


def print_file(path, first=None, last=None) -> None:
    """Write :func:`format_file` output to stdout."""
    print(format_file(path, first, last), end="")