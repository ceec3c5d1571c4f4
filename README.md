# ustrkit

Small utilities for working with UTF-8 text by code point rather than by byte.

## Install

    pip install ustrkit

## UTF-8 helpers

`ustrkit.utf8` works on UTF-8 data. Each function that takes data accepts
`bytes`, `bytearray`, `memoryview` or `str` (a `str` is encoded as UTF-8 first).

    from ustrkit.utf8 import (
        is_ascii, is_continuation_byte, codepoint_size,
        utf8_strlen, cpi_of_bi, bi_of_cpi,
    )

    data = "cse29🐕".encode()
    utf8_strlen(data)            # 6 code points
    bi_of_cpi(data, 5)           # 5, the byte offset of the dog
    cpi_of_bi(data, 5)           # 5, the code point index at byte 5
    codepoint_size(0xF0)         # 4
    is_continuation_byte(0x9F)   # True
    is_ascii(b"hello")           # True

Errors are raised, not returned:

- `codepoint_size` raises `ValueError` for a byte that cannot start a UTF-8
  sequence, or for a value outside 0–255. `utf8_strlen`, `cpi_of_bi` and
  `bi_of_cpi` raise `ValueError` when they meet such a lead byte.
- `cpi_of_bi` raises `IndexError` if the byte index is negative or not inside
  the data. A byte index in the middle of a multi-byte sequence maps to the
  following code point.
- `bi_of_cpi` raises `IndexError` if the code point index is negative or past
  the end. The index one past the last code point maps to the length of the data.

## UStr

`ustrkit.ustr.UStr` is an immutable string whose indices count code points.

    from ustrkit.ustr import UStr

    s = UStr("apples🍎 and bananas🍌")
    len(s)                 # 20 code points
    s.byte_count           # 26 UTF-8 bytes
    s.is_ascii             # False
    s.substring(0, 7)      # UStr("apples🍎")
    s.reverse()            # UStr("🍌sananab dna 🍎selppa")
    s.remove_at(6)         # UStr("apples and bananas🍌")
    s + UStr("!")          # same as s.concat(UStr("!"))
    s.describe()           # "apples🍎 and bananas🍌 [codepoints: 20 | bytes: 26]"

Other members: `text` (the `str` value), `codepoints` (same as `len`),
`encode()` (the UTF-8 bytes) and the class method `UStr.from_bytes(data)`,
which decodes UTF-8 bytes. `str(s)` gives the text; two `UStr` values are
equal when their text is equal, and they can be used as dictionary keys.

`substring(start, end)` returns an empty `UStr` if the range is not valid
(negative start, end past the length, or start not before end).
`remove_at` returns the string unchanged if the index is out of range.
The constructor takes a `str` only and raises `TypeError` otherwise; `+`
only combines two `UStr` values.

## UStrList

`ustrkit.strlist` has a list of `UStr` values, plus `join` and `split`.
Wherever a `UStr` is taken, a plain `str` is accepted too.

    from ustrkit.strlist import UStrList, join, split
    from ustrkit.ustr import UStr

    words = UStrList([UStr("hello"), UStr("this is"), UStr("cse29🐕")])
    words.join(UStr("-"))               # UStr("hello-this is-cse29🐕")
    words.insert(1, UStr("there"))      # positions 0 to len(words) are valid
    words.remove_at(0)                  # returns the removed UStr("hello")
    words[0]                            # UStr("there")
    words[1:]                           # a new UStrList

    split(UStr("a,b,"), UStr(","))      # UStrList of "a", "b", ""
    join([UStr("x"), UStr("y")], UStr("::"))   # UStr("x::y")

`split` with an empty separator gives a list that holds the whole string; a
trailing separator gives a trailing empty string. `insert` and `remove_at`
raise `IndexError` when the index is out of range.

## What it does not do

ustrkit is a library only: it has no command-line program.