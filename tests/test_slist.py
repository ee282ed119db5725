import pytest

from runikit.slist import Slist, SlistNode


def contents(lst):
    return [node.element for node in lst]


def from_values(values):
    lst = Slist()
    for value in reversed(values):
        lst.push_front(SlistNode(value))
    return lst


def test_new_list_is_empty():
    lst = Slist()
    assert lst.is_empty()
    assert lst.head is None
    assert list(lst) == []


def test_push_front_orders_reversed():
    lst = Slist()
    for value in "abc":
        lst.push_front(SlistNode(value))
    assert contents(lst) == ["c", "b", "a"]
    assert not lst.is_empty()


def test_pop_front_returns_nodes_in_order():
    lst = from_values([1, 2, 3])
    popped = [lst.pop_front().element for _ in range(3)]
    assert popped == [1, 2, 3]
    assert lst.is_empty()
    assert lst.pop_front() is None


@pytest.mark.parametrize("start, added, result", [([1, 3], 2, [1, 2, 3]), ([1], 2, [1, 2])])
def test_insert_after_head(start, added, result):
    lst = from_values(start)
    lst.head.insert_after(SlistNode(added))
    assert contents(lst) == result


def test_tail_flag():
    lst = from_values([1, 2])
    *_, last = lst
    assert last.is_tail()
    assert not lst.head.is_tail()


def test_remove_after_keeps_removed_link():
    lst = from_values([1, 2, 3])
    third = list(lst)[2]
    removed = lst.head.remove_after()
    assert removed.element == 2
    assert removed.next is third
    assert contents(lst) == [1, 3]


def test_remove_after_tail_returns_none():
    lst = from_values([1])
    assert lst.head.remove_after() is None
    assert contents(lst) == [1]


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3, 4]])
def test_round_trip(values):
    assert contents(from_values(values)) == values


def test_iteration_survives_popping_current():
    lst = from_values([1, 2, 3])
    seen = []
    for node in lst:
        seen.append(node.element)
        lst.pop_front()
    assert seen == [1, 2, 3]
    assert lst.is_empty()


def test_repr_names_element():
    assert repr(SlistNode(5)) == "SlistNode(5)"