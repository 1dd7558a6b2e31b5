import pytest

from labstructs.doubly_linked_list import OrderedDoublyLinkedList, main


def test_insert_keeps_order():
    items = OrderedDoublyLinkedList([5, 3, 9, 1, 7])
    assert list(items) == [1, 3, 5, 7, 9]
    assert len(items) == 5


def test_str_of_one_to_ten():
    items = OrderedDoublyLinkedList(range(1, 11))
    assert str(items) == "[1, 2, 3, 4, 5, 6, 7, 8, 9, 10]"


def test_reversed_str_and_reversed():
    items = OrderedDoublyLinkedList(range(1, 11))
    assert items.reversed_str() == "[10, 9, 8, 7, 6, 5, 4, 3, 2, 1]"
    assert list(reversed(items)) == list(range(10, 0, -1))


def test_empty_list_renders_brackets():
    items = OrderedDoublyLinkedList()
    assert str(items) == "[]"
    assert items.reversed_str() == "[]"
    assert items.is_empty()


def test_is_empty_changes_after_copy_from():
    source = OrderedDoublyLinkedList(range(1, 11))
    target = OrderedDoublyLinkedList()
    assert target.is_empty()
    target.copy_from(source)
    assert not target.is_empty()
    assert list(target) == list(source)


def test_copy_from_replaces_existing_contents():
    target = OrderedDoublyLinkedList([100, 200])
    target.copy_from(OrderedDoublyLinkedList([1, 2]))
    assert list(target) == [1, 2]
    assert len(target) == 2


def test_copy_from_self_keeps_contents():
    items = OrderedDoublyLinkedList([3, 1, 2])
    items.copy_from(items)
    assert list(items) == [1, 2, 3]


def test_copy_is_independent():
    original = OrderedDoublyLinkedList(range(1, 11))
    duplicate = original.copy()
    duplicate.insert(4)
    assert list(duplicate) == [1, 2, 3, 4, 4, 5, 6, 7, 8, 9, 10]
    assert list(original) == list(range(1, 11))


def test_delete_first_last_and_middle():
    items = OrderedDoublyLinkedList(range(1, 11))
    items.insert(4)
    items.delete_node(1)
    items.delete_node(10)
    items.delete_node(5)
    assert str(items) == "[2, 3, 4, 4, 6, 7, 8, 9]"
    assert items.front() == 2
    assert items.back() == 9
    assert list(reversed(items)) == [9, 8, 7, 6, 4, 4, 3, 2]


def test_delete_only_element_empties_list():
    items = OrderedDoublyLinkedList([7])
    items.delete_node(7)
    assert items.is_empty()
    assert len(items) == 0
    with pytest.raises(IndexError):
        items.back()


def test_delete_from_empty_raises():
    with pytest.raises(ValueError):
        OrderedDoublyLinkedList().delete_node(1)


def test_delete_missing_raises():
    items = OrderedDoublyLinkedList([1, 3, 5])
    with pytest.raises(ValueError):
        items.delete_node(4)
    with pytest.raises(ValueError):
        items.delete_node(42)
    assert list(items) == [1, 3, 5]


def test_search():
    items = OrderedDoublyLinkedList([2, 3, 4, 6, 7, 8, 9])
    assert items.search(3)
    assert not items.search(42)
    assert not items.search(5)
    assert 6 in items


def test_front_and_back_on_empty_raise():
    items = OrderedDoublyLinkedList()
    with pytest.raises(IndexError):
        items.front()
    with pytest.raises(IndexError):
        items.back()


def test_clear():
    items = OrderedDoublyLinkedList([1, 2, 3])
    items.clear()
    assert len(items) == 0
    assert list(items) == []
    assert list(reversed(items)) == []


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "[1, 2, 3, 4, 5, 6, 7, 8, 9, 10]" in out
    assert "[2, 3, 4, 4, 6, 7, 8, 9]" in out
    assert "Number 3 was found!" in out
    assert "Number 42 was not found" in out
    assert "Front of List 4 is 2" in out
    assert "Back of List 4 is 9" in out