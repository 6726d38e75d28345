import pytest

from dslib.doubly_linked import DoublyLinkedList, main


def _consistent(lst):
    return list(lst) == list(reversed(list(reversed(lst))))


def test_constructor_keeps_order():
    items = [3, 1, 4, 1, 5]
    lst = DoublyLinkedList(items)
    assert list(lst) == items
    assert list(reversed(lst)) == items[::-1]


def test_new_list_is_empty():
    lst = DoublyLinkedList()
    assert lst.empty() is True
    assert len(lst) == 0
    assert str(lst) == "nullptr"


def test_push_front_and_back():
    lst = DoublyLinkedList()
    lst.push_front(2)
    lst.push_back(3)
    lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert _consistent(lst)
    assert not lst.empty()


def test_pop_front_and_back():
    items = [1, 2, 3, 4]
    lst = DoublyLinkedList(items)
    assert lst.pop_front() == items[0]
    assert lst.pop_back() == items[-1]
    assert list(lst) == items[1:-1]
    assert _consistent(lst)
    assert len(lst) == 2


def test_pop_until_empty_resets_ends():
    lst = DoublyLinkedList(["x"])
    assert lst.pop_back() == "x"
    assert lst.empty()
    lst.push_front("y")
    assert list(lst) == ["y"]
    assert list(reversed(lst)) == ["y"]


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_from_empty_raises(method):
    with pytest.raises(IndexError, match="empty"):
        getattr(DoublyLinkedList(), method)()


def test_reverse():
    items = [1, 2, 3, 4, 5]
    lst = DoublyLinkedList(items)
    lst.reverse()
    assert list(lst) == items[::-1]
    assert list(reversed(lst)) == items
    lst.push_back(0)
    assert list(lst)[-1] == 0
    assert _consistent(lst)


def test_reverse_single_element():
    lst = DoublyLinkedList([9])
    lst.reverse()
    assert list(lst) == [9]
    assert list(reversed(lst)) == [9]


def test_remove_all_occurrences():
    lst = DoublyLinkedList([5, 1, 5, 2, 5])
    lst.remove(5)
    assert list(lst) == [1, 2]
    assert list(reversed(lst)) == [2, 1]
    assert len(lst) == 2


def test_remove_everything():
    lst = DoublyLinkedList([4, 4])
    lst.remove(4)
    assert lst.empty()
    assert list(reversed(lst)) == []


def test_str_format():
    assert str(DoublyLinkedList([20, 10, 77])) == "20 <-> 10 <-> 77 <-> nullptr"


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "20 <-> 10 <-> 77 <-> nullptr"
    assert lines[2] == "Empty: 0"
    assert lines[3] == "77 <-> 10 <-> 20 <-> nullptr"