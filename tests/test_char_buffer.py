import pytest

from dsakit.char_buffer import CharBuffer


def test_new_buffer_is_empty_with_capacity_four():
    buf = CharBuffer()
    assert len(buf) == 0
    assert str(buf) == ""
    assert buf.capacity == 4


@pytest.mark.parametrize("name", ["铁剑", "匕首", "刀", "斧头", "西洋剑", "无", "钢剑"])
def test_push_back_str_holds_the_text(name):
    buf = CharBuffer()
    buf.push_back_str(name)
    assert str(buf) == name
    assert len(buf) == len(name)


def test_capacity_doubles_when_full():
    buf = CharBuffer()
    buf.push_back_str("abc")
    assert buf.capacity == 4
    buf.push_back_char("d")
    assert buf.capacity == 8
    assert str(buf) == "abcd"


def test_capacity_always_exceeds_size():
    buf = CharBuffer()
    for ch in "the quick brown fox jumps":
        buf.push_back_char(ch)
        assert buf.capacity > len(buf)


def test_insert_str_in_middle():
    buf = CharBuffer("abc")
    buf.insert_str("XY", 1)
    assert str(buf) == "abc"[:1] + "XY" + "abc"[1:]


def test_insert_str_at_front_and_end():
    buf = CharBuffer("mid")
    buf.insert_str("<", 0)
    buf.insert_str(">", len(buf))
    assert str(buf) == "<mid>"


def test_insert_chars_repeats_character():
    buf = CharBuffer("ab")
    buf.insert_chars("-", 1, 3)
    assert str(buf) == "a" + "-" * 3 + "b"
    assert len(buf) == 5


def test_insert_char_and_push_back_char():
    buf = CharBuffer()
    buf.push_back_char("b")
    buf.insert_char("a", 0)
    buf.push_back_char("c")
    assert str(buf) == "abc"


def test_insert_beyond_end_raises():
    buf = CharBuffer("ab")
    with pytest.raises(IndexError):
        buf.insert_str("x", 3)
    with pytest.raises(IndexError):
        buf.insert_chars("x", -1, 1)
    assert str(buf) == "ab"


def test_insert_rejects_multi_char_and_negative_count():
    buf = CharBuffer()
    with pytest.raises(ValueError):
        buf.insert_char("ab", 0)
    with pytest.raises(ValueError):
        buf.insert_chars("a", 0, -1)


def test_delete_at_returns_removed_char():
    buf = CharBuffer("hello")
    assert buf.delete_at(1) == "e"
    assert str(buf) == "hllo"
    with pytest.raises(IndexError):
        buf.delete_at(4)


def test_delete_range():
    buf = CharBuffer("hello world")
    assert buf.delete_range(0, 6) == "hello "
    assert str(buf) == "world"
    assert len(buf) == 5


def test_delete_range_invalid():
    buf = CharBuffer("abc")
    with pytest.raises(IndexError):
        buf.delete_range(2, 1)
    with pytest.raises(IndexError):
        buf.delete_range(0, 4)


def test_pop_back_until_empty():
    buf = CharBuffer("xyz")
    popped = [buf.pop_back() for _ in range(3)]
    assert popped == ["z", "y", "x"]
    with pytest.raises(IndexError):
        buf.pop_back()


def test_find_char():
    buf = CharBuffer("hello")
    assert buf.find_char("l") == "hello".index("l")
    assert buf.find_char("q") == -1


def test_find_str():
    buf = CharBuffer("hello world")
    assert buf.find_str("world") == 6
    assert buf.find_str("zz") == -1
    assert buf.find_str("") == -1


def test_resize_sets_capacity_and_truncates():
    buf = CharBuffer("abcdef")
    buf.resize(3)
    assert buf.capacity == 3
    assert str(buf) == "abc"
    buf.resize(0)
    assert buf.capacity == 3
    with pytest.raises(ValueError):
        buf.resize(-1)


def test_push_after_resize_grows_again():
    buf = CharBuffer("ab")
    buf.resize(2)
    buf.push_back_char("c")
    assert str(buf) == "abc"
    assert buf.capacity > len(buf)