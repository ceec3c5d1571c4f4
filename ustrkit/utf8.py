"""Byte-level UTF-8 helpers: lead-byte sizes, code point counts and index conversion."""

from __future__ import annotations

from collections.abc import Iterator


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def is_ascii(data: bytes | bytearray | memoryview | str) -> bool:
    """Return True if every byte of ``data`` is a 7-bit ASCII byte."""
    return all(byte <= 0x7F for byte in _as_bytes(data))


def is_continuation_byte(byte: int) -> bool:
    """Return True if ``byte`` has the ``10xxxxxx`` continuation pattern."""
    return (byte & 0xC0) == 0x80


def codepoint_size(byte: int) -> int:
    """Return how many bytes the code point starting with lead ``byte`` occupies.

    Raises ValueError if ``byte`` cannot start a UTF-8 sequence.
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte value: {byte}")
    if byte < 0x80:
        return 1
    if (byte & 0xE0) == 0xC0:
        return 2
    if (byte & 0xF0) == 0xE0:
        return 3
    if (byte & 0xF8) == 0xF0:
        return 4
    raise ValueError(f"invalid UTF-8 lead byte 0x{byte:02x}")


def _lead_offsets(raw: bytes) -> Iterator[int]:
    """Yield the byte offset of each code point's lead byte."""
    pos = 0
    while pos < len(raw):
        yield pos
        pos += codepoint_size(raw[pos])


def utf8_strlen(data: bytes | bytearray | memoryview | str) -> int:
    """Return the number of code points encoded in ``data``.

    Raises ValueError on an invalid lead byte.
    """
    return sum(1 for _ in _lead_offsets(_as_bytes(data)))


def cpi_of_bi(data: bytes | bytearray | memoryview | str, byte_index: int) -> int:
    """Convert a byte index into a code point index.

    A byte index inside a multi-byte sequence maps to the following code point.
    Raises IndexError if ``byte_index`` is outside the data and ValueError on
    invalid encoding.
    """
    raw = _as_bytes(data)
    if byte_index < 0 or byte_index >= len(raw):
        raise IndexError(f"byte index {byte_index} out of range")
    count = 0
    for offset in _lead_offsets(raw):
        if offset >= byte_index:
            return count
        count += 1
    return count


def bi_of_cpi(data: bytes | bytearray | memoryview | str, codepoint_index: int) -> int:
    """Convert a code point index into the byte index where it starts.

    The index one past the last code point maps to the end of the data.
    Raises IndexError if ``codepoint_index`` is out of range and ValueError on
    invalid encoding.
    """
    if codepoint_index < 0:
        raise IndexError(f"code point index {codepoint_index} out of range")
    raw = _as_bytes(data)
    pos = 0
    for _ in range(codepoint_index):
        if pos >= len(raw):
            raise IndexError(f"code point index {codepoint_index} out of range")
        pos += codepoint_size(raw[pos])
    return pos