import pytest

from ustrkit.strlist import UStrList, join, split
from ustrkit.ustr import UStr


def _fixture_list():
    return UStrList([UStr("hello"), UStr("this is"), UStr("cse29🐕")])


@pytest.mark.parametrize(
    "sep, expected",
    [
        ("-", "hello-this is-cse29🐕"),
        (",", "hello,this is,cse29🐕"),
        ("🐕", "hello🐕this is🐕cse29🐕"),
        ("", "hellothis iscse29🐕"),
    ],
)
def test_join_cases(sep, expected):
    assert str(_fixture_list().join(UStr(sep))) == expected


def test_join_describe():
    result = _fixture_list().join(UStr("-"))
    assert result.describe() == "hello-this is-cse29🐕 [codepoints: 20 | bytes: 23]"


def test_module_join_accepts_str():
    assert str(join(["a", "b", "c"], "::")) == "a::b::c"


def test_join_empty_list():
    assert str(UStrList().join(",")) == ""


def test_split_basic():
    assert [str(x) for x in split(UStr("a,b,c"), UStr(","))] == ["a", "b", "c"]


def test_split_trailing_delimiter():
    assert [str(x) for x in split("a,b,", ",")] == ["a", "b", ""]


def test_split_empty_delimiter():
    assert [str(x) for x in split("hello world", "")] == ["hello world"]


def test_split_multichar_delimiter():
    assert [str(x) for x in split("a🐕🐕b🐕🐕c", "🐕🐕")] == ["a", "b", "c"]


@pytest.mark.parametrize("text, sep", [("x--y--", "--"), ("no match", ";"), ("a b c", " ")])
def test_split_join_round_trip(text, sep):
    assert str(split(text, sep).join(sep)) == text


def test_insert_positions():
    lst = UStrList(["b"])
    lst.insert(0, "a")
    lst.insert(2, UStr("d"))
    lst.insert(2, "c")
    assert [str(x) for x in lst] == ["a", "b", "c", "d"]
    assert len(lst) == 4


def test_insert_into_empty():
    lst = UStrList()
    lst.insert(0, "only")
    assert [str(x) for x in lst] == ["only"]


@pytest.mark.parametrize("index", [-1, 2])
def test_insert_invalid_index(index):
    lst = UStrList(["a"])
    with pytest.raises(IndexError):
        lst.insert(index, "x")
    assert [str(x) for x in lst] == ["a"]


def test_remove_at():
    lst = _fixture_list()
    removed = lst.remove_at(1)
    assert removed == UStr("this is")
    assert [str(x) for x in lst] == ["hello", "cse29🐕"]


@pytest.mark.parametrize("index", [-1, 3])
def test_remove_at_invalid_index(index):
    lst = _fixture_list()
    with pytest.raises(IndexError):
        lst.remove_at(index)
    assert len(lst) == 3


def test_getitem_and_slice():
    lst = _fixture_list()
    assert lst[0] == UStr("hello")
    assert [str(x) for x in lst[1:]] == ["this is", "cse29🐕"]


def test_rejects_non_string_items():
    with pytest.raises(TypeError):
        UStrList([1, 2])