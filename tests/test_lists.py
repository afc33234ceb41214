import pytest

from pipex.libft.lists import LinkedList


def test_items_keep_their_order():
    assert list(LinkedList([1, 2, 3])) == [1, 2, 3]


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []


def test_push_front_and_back():
    lst = LinkedList(["b"])
    lst.push_front("a")
    lst.push_back("c")
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_last_follows_pushes():
    lst = LinkedList()
    lst.push_front("x")
    assert lst.last() == "x"
    lst.push_back("y")
    assert lst.last() == "y"
    lst.push_front("z")
    assert lst.last() == "y"


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_pop_front_hands_content_to_delete():
    deleted = []
    lst = LinkedList(["a", "b"])
    assert lst.pop_front(deleted.append) == "a"
    assert deleted == ["a"]
    assert list(lst) == ["b"]


def test_pop_last_element_resets_tail():
    lst = LinkedList(["only"])
    lst.pop_front()
    with pytest.raises(IndexError):
        lst.last()
    lst.push_back("new")
    assert list(lst) == ["new"]


def test_pop_from_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_every_content():
    seen = []
    LinkedList(["p", "q"]).for_each(seen.append)
    assert seen == ["p", "q"]


def test_map_builds_new_list():
    source = LinkedList(["a", "bb"])
    mapped = source.map(len)
    assert list(mapped) == [1, 2]
    assert list(source) == ["a", "bb"]


def test_map_failure_deletes_partial_result():
    deleted = []

    def upper_or_fail(text):
        if text == "boom":
            raise RuntimeError("boom")
        return text.upper()

    with pytest.raises(RuntimeError):
        LinkedList(["a", "b", "boom", "c"]).map(upper_or_fail, deleted.append)
    assert deleted == ["A", "B"]


def test_len_matches_iteration():
    lst = LinkedList(range(5))
    lst.push_front(-1)
    lst.pop_front()
    assert len(lst) == len(list(lst))