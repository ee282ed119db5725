import pytest

from runikit.stailq import Stailq, StailqNode


def queue_of(*values):
    queue = Stailq()
    for value in values:
        queue.push_back(StailqNode(value))
    return queue


def drained(queue):
    out = []
    while not queue.is_empty():
        out.append(queue.pop_front().element)
    return out


def test_new_queue_is_empty():
    queue = Stailq()
    assert queue.is_empty()
    assert queue.head is None and queue.tail is None


def test_push_back_keeps_order_and_tail():
    queue = queue_of(1, 2, 3)
    assert [n.element for n in queue] == [1, 2, 3]
    assert queue.tail.element == 3
    assert queue.tail.is_tail()


def test_push_front_on_empty_sets_tail():
    queue = Stailq()
    node = StailqNode("x")
    queue.push_front(node)
    assert queue.head is node
    assert queue.tail is node


def test_push_front_keeps_tail():
    queue = queue_of(2)
    queue.push_front(StailqNode(1))
    assert queue.tail.element == 2
    assert drained(queue) == [1, 2]


def test_pop_front_clears_tail_when_empty():
    queue = queue_of(1, 2)
    assert queue.pop_front().element == 1
    assert queue.tail.element == 2
    assert queue.pop_front().element == 2
    assert queue.tail is None
    assert queue.pop_front() is None


@pytest.mark.parametrize("with_owner", [True, False])
def test_insert_after_tail(with_owner):
    queue = queue_of(1)
    if with_owner:
        queue.head.insert_after(StailqNode(2), queue)
        assert queue.tail.element == 2
        assert drained(queue) == [1, 2]
    else:
        with pytest.raises(ValueError):
            queue.head.insert_after(StailqNode(2))
        assert drained(queue) == [1]


def test_insert_after_middle_needs_no_owner():
    queue = queue_of(1, 3)
    queue.head.insert_after(StailqNode(2))
    assert queue.tail.element == 3
    assert drained(queue) == [1, 2, 3]


def test_remove_after_tail_moves_tail_back():
    queue = queue_of(1, 2)
    removed = queue.head.remove_after(queue)
    assert removed.element == 2
    assert queue.tail is queue.head
    assert drained(queue) == [1]


def test_remove_after_middle():
    queue = queue_of(1, 2, 3)
    assert queue.head.remove_after().element == 2
    assert queue.tail.element == 3
    assert drained(queue) == [1, 3]


def test_remove_after_tail_node_returns_none():
    queue = queue_of(1)
    assert queue.head.remove_after(queue) is None
    assert queue.tail is queue.head


def test_remove_after_last_without_owner_raises():
    queue = queue_of(1, 2)
    with pytest.raises(ValueError):
        queue.head.remove_after()


@pytest.mark.parametrize("values", [(), (5,), (1, 2, 3, 4, 5)])
def test_round_trip(values):
    assert drained(queue_of(*values)) == list(values)