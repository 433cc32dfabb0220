import pytest

from libft.lists import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_from_items_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node


def test_push_back_appends():
    lst = LinkedList()
    lst.push_back("x")
    node = lst.push_back("y")
    assert list(lst) == ["x", "y"]
    assert lst.last() is node


def test_last_returns_node():
    lst = LinkedList([10, 20, 30])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == 30
    assert tail.next is None


def test_len_matches_pushes():
    lst = LinkedList()
    for i in range(5):
        lst.push_front(i)
    assert len(lst) == 5
    assert list(lst) == [4, 3, 2, 1, 0]


def test_clear_calls_delete_in_order_and_empties():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_empty_list_calls_nothing():
    deleted = []
    LinkedList().clear(deleted.append)
    assert deleted == []


def test_iterate_visits_each_content():
    seen = []
    LinkedList([1, 2, 3]).iterate(seen.append)
    assert seen == [1, 2, 3]


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList(["ab", "cd"])
    mapped = original.map(str.upper, lambda _: None)
    assert list(mapped) == ["AB", "CD"]
    assert list(original) == ["ab", "cd"]
    assert mapped.head is not original.head


def test_map_empty_list():
    mapped = LinkedList().map(str.upper, lambda _: None)
    assert list(mapped) == []


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 10

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [10, 20]


def test_round_trip_through_iteration():
    items = [None, 0, "s", (1, 2)]
    assert list(LinkedList(LinkedList(items))) == items