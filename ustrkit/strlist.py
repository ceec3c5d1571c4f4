"""A list of UStr values with join and split."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .ustr import UStr


def _coerce(value: UStr | str) -> UStr:
    if isinstance(value, UStr):
        return value
    if isinstance(value, str):
        return UStr(value)
    raise TypeError(f"expected UStr or str, not {type(value).__name__}")


class UStrList:
    """An ordered, growable sequence of UStr values."""

    def __init__(self, items: Iterable[UStr | str] = ()) -> None:
        self._items = [_coerce(item) for item in items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[UStr]:
        return iter(self._items)

    def __getitem__(self, index: int | slice) -> UStr | UStrList:
        if isinstance(index, slice):
            return UStrList(self._items[index])
        return self._items[index]

    def __repr__(self) -> str:
        return f"UStrList({[str(item) for item in self._items]!r})"

    def insert(self, index: int, s: UStr | str) -> None:
        """Insert ``s`` before position ``index`` (0 to len inclusive).

        Raises IndexError for any other index.
        """
        if index < 0 or index > len(self._items):
            raise IndexError(f"insert index {index} out of range")
        self._items.insert(index, _coerce(s))

    def remove_at(self, index: int) -> UStr:
        """Remove and return the element at ``index``.

        Raises IndexError if ``index`` is out of range.
        """
        if index < 0 or index >= len(self._items):
            raise IndexError(f"remove index {index} out of range")
        return self._items.pop(index)

    def join(self, separator: UStr | str) -> UStr:
        """Return all elements joined by ``separator``."""
        sep = _coerce(separator)
        return UStr(sep.text.join(item.text for item in self._items))


def join(strings: Iterable[UStr | str], separator: UStr | str) -> UStr:
    """Join ``strings`` with ``separator``."""
    return UStrList(strings).join(separator)


def split(s: UStr | str, separator: UStr | str) -> UStrList:
    """Split ``s`` on every occurrence of ``separator``.

    An empty separator yields a list holding ``s`` alone; a trailing
    separator yields a trailing empty string.
    """
    text = _coerce(s)
    sep = _coerce(separator)
    if not sep.text:
        return UStrList([text])
    return UStrList(text.text.split(sep.text))