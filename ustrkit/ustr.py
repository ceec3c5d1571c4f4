"""An immutable Unicode string that tracks code point and byte lengths."""

from __future__ import annotations


class UStr:
    """Text with its code point count, UTF-8 byte count and ASCII flag."""

    __slots__ = ("_text", "_byte_count")

    def __init__(self, contents: str = "") -> None:
        if not isinstance(contents, str):
            raise TypeError(f"UStr contents must be str, not {type(contents).__name__}")
        self._text = contents
        self._byte_count = len(contents.encode("utf-8"))

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> UStr:
        """Build a UStr from UTF-8 encoded bytes."""
        return cls(bytes(data).decode("utf-8"))

    @property
    def text(self) -> str:
        return self._text

    @property
    def codepoints(self) -> int:
        return len(self._text)

    @property
    def byte_count(self) -> int:
        return self._byte_count

    @property
    def is_ascii(self) -> bool:
        return self._byte_count == len(self._text)

    def encode(self) -> bytes:
        return self._text.encode("utf-8")

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"UStr({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UStr):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __add__(self, other: object) -> UStr:
        if isinstance(other, UStr):
            return self.concat(other)
        return NotImplemented

    def substring(self, start: int, end: int) -> UStr:
        """Return code points ``start`` (inclusive) to ``end`` (exclusive).

        An invalid range yields the empty string.
        """
        if start < 0 or end > len(self._text) or start >= end:
            return UStr("")
        return UStr(self._text[start:end])

    def concat(self, other: UStr) -> UStr:
        """Return this string followed by ``other``."""
        return UStr(self._text + other._text)

    def remove_at(self, index: int) -> UStr:
        """Return the string without the code point at ``index``.

        An out-of-range index returns this string unchanged.
        """
        if index < 0 or index >= len(self._text):
            return self
        return UStr(self._text[:index] + self._text[index + 1:])

    def reverse(self) -> UStr:
        """Return the string with its code points in reverse order."""
        return UStr(self._text[::-1])

    def describe(self) -> str:
        """Return the text followed by its code point and byte counts."""
        return f"{self._text} [codepoints: {len(self._text)} | bytes: {self._byte_count}]"