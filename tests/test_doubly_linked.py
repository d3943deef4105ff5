import pytest

from dsakit.doubly_linked import DoublyLinkedList


def test_list_walkthrough_with_insert_and_erase():
    lst = DoublyLinkedList()
    for value in (1, 2, 3):
        lst.push_back(value)
    assert str(lst) == "1->2->3->NULL"

    for value in (0, -1, -2, -3):
        lst.push_front(value)
    assert list(lst) == [-3, -2, -1, 0, 1, 2, 3]

    lst.pop_back()
    lst.pop_back()
    assert list(lst) == [-3, -2, -1, 0, 1]

    lst.pop_front()
    lst.pop_front()
    lst.pop_front()
    assert list(lst) == [0, 1]

    node = lst.find(1)
    lst.insert_before(node, 66)
    assert list(lst) == [0, 66, 1]
    assert lst.erase(node) == 1
    assert list(lst) == [0, 66]


def test_erase_found_values_and_size():
    lst = DoublyLinkedList()
    for value in (1, 2, 3, 4, 5):
        lst.push_back(value)
    for value in (0, -1, -2, -3, -4, -5):
        lst.push_front(value)
    assert list(lst) == list(range(-5, 6))

    for _ in range(3):
        lst.pop_back()
    assert list(lst) == list(range(-5, 3))
    for _ in range(3):
        lst.pop_front()
    assert list(lst) == [-2, -1, 0, 1, 2]

    lst.erase(lst.find(0))
    assert list(lst) == [-2, -1, 1, 2]
    lst.erase(lst.find(1))
    assert list(lst) == [-2, -1, 2]
    assert len(lst) == 3


def test_pop_returns_values():
    lst = DoublyLinkedList(["a", "b", "c"])
    assert lst.pop_front() == "a"
    assert lst.pop_back() == "c"
    assert list(lst) == ["b"]


def test_pop_from_empty_raises():
    lst = DoublyLinkedList()
    with pytest.raises(IndexError):
        lst.pop_back()
    with pytest.raises(IndexError):
        lst.pop_front()


def test_empty_list_prints_null():
    lst = DoublyLinkedList()
    assert str(lst) == "NULL"
    assert len(lst) == 0


def test_push_front_on_empty_list():
    lst = DoublyLinkedList()
    lst.push_front(9)
    assert list(lst) == [9]


def test_find_missing_returns_none():
    lst = DoublyLinkedList([1, 2, 3])
    assert lst.find(42) is None


def test_erase_twice_raises():
    lst = DoublyLinkedList([1, 2, 3])
    node = lst.find(2)
    lst.erase(node)
    with pytest.raises(ValueError):
        lst.erase(node)
    assert list(lst) == [1, 3]


def test_insert_before_none_raises():
    lst = DoublyLinkedList([1])
    with pytest.raises(ValueError):
        lst.insert_before(None, 5)


def test_reversed_matches_forward():
    values = [5, 3, 8, 1]
    lst = DoublyLinkedList(values)
    assert list(reversed(lst)) == list(reversed(values))


def test_insert_before_first_node_becomes_head():
    lst = DoublyLinkedList([2, 3])
    lst.insert_before(lst.find(2), 1)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3