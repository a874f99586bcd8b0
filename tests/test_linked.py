import pytest

from shelltools.linked import LinkedList, Node


def test_build_from_items_keeps_order():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node
    assert node.next.content == 2


def test_push_back_appends_and_updates_last():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert list(lst) == [1, 2]
    assert lst.last() is node
    assert lst.last().content == 2


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    lst.push_front("x")
    assert lst.last().content == "x"
    lst.push_back("y")
    assert list(lst) == ["x", "y"]


def test_last_node_has_no_next():
    lst = LinkedList(range(5))
    assert isinstance(lst.last(), Node)
    assert lst.last().next is None
    assert lst.last().content == 4


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None
    assert lst.last() is None


def test_clear_without_delete():
    lst = LinkedList("abc")
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_every_content():
    seen = []
    LinkedList(["p", "q"]).for_each(seen.append)
    assert seen == ["p", "q"]


def test_map_applies_function_and_leaves_original():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda x: x * 10)
    assert list(mapped) == [x * 10 for x in [1, 2, 3]]
    assert list(lst) == [1, 2, 3]
    assert len(mapped) == len(lst)


def test_map_without_function_shares_contents():
    shared = object()
    lst = LinkedList([shared])
    mapped = lst.map(None)
    assert next(iter(mapped)) is shared
    assert mapped.head is not lst.head


def test_map_failure_deletes_produced_contents():
    deleted = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value

    lst = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        lst.map(func, deleted.append)
    assert deleted == [1, 2]


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(lambda x: x)) == 0