"""Bit-level rendering of raw memory, most significant byte first."""

_LINEFEED_LIMIT = 8


def byte_bits(value: int) -> str:
    """Return the eight bits of an unsigned byte, high bit first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return format(value, "08b")


def format_binary(data) -> str:
    """Render one value's memory bytes (little-endian order), eight per line."""
    raw = bytes(data)
    pieces = []
    for position, byte in enumerate(reversed(raw)):
        if position % _LINEFEED_LIMIT == 0:
            pieces.append("\n\t>" if position == 0 else "\n\t~")
        pieces.append(" " + byte_bits(byte))
    return "".join(pieces)


def format_binaries(data, item_size: int) -> str:
    """Render an array of values, each ``item_size`` bytes long."""
    raw = bytes(data)
    if item_size <= 0:
        raise ValueError("item_size must be positive")
    if len(raw) % item_size:
        raise ValueError("data length is not a multiple of item_size")

    items = [raw[start:start + item_size] for start in range(0, len(raw), item_size)]
    values_per_line = _LINEFEED_LIMIT // item_size
    value_count = 0
    byte_count = 0
    pieces = ["\n\t>"]

    for index, item in enumerate(items):
        last_byte = item_size - 1
        for offset, byte in enumerate(reversed(item)):
            if byte_count >= _LINEFEED_LIMIT and offset < last_byte:
                byte_count = 0
                pieces.append("\n\t~")
            pieces.append(" " + byte_bits(byte))
            byte_count += 1

        value_count += 1
        if value_count >= values_per_line and index < len(items) - 1:
            value_count = 0
            byte_count = 0
            pieces.append("\n\t>")
        else:
            pieces.append("  ")

    return "".join(pieces)


def print_binary(data) -> None:
    """Write :func:`format_binary` output to stdout."""
    print(format_binary(data), end="")


def print_binaries(data, item_size: int) -> None:
    """Write :func:`format_binaries` output to stdout."""
    print(format_binaries(data, item_size), end="")