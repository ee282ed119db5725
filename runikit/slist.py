"""Intrusive singly linked list, plus the pieces shared by the other lists."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


def _require_owner(owner: Any) -> Any:
    if owner is None:
        raise ValueError("the owning container is needed for this operation")
    return owner


def _walk(node: Any) -> Iterator[Any]:
    while node is not None:
        following = node.next
        yield node
        node = following


class _Link:
    """An element with a forward link."""

    __slots__ = ("element", "next")

    def __init__(self, element: Any) -> None:
        self.element = element
        self.next: Any = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.element!r})"


class SlistNode(_Link):
    """A node of a :class:`Slist`, carrying an element and a link to the next node."""

    __slots__ = ()

    def insert_after(self, node: SlistNode) -> None:
        """Link ``node`` directly after this node."""
        node.next = self.next
        self.next = node

    def remove_after(self) -> SlistNode | None:
        """Unlink and return the node after this one, or None if this is the tail.

        The removed node keeps its own ``next`` link.
        """
        removed = self.next
        if removed is not None:
            self.next = removed.next
        return removed

    def is_tail(self) -> bool:
        """Whether no node follows this one."""
        return self.next is None


class Slist:
    """A singly linked list of :class:`SlistNode` objects owned by the caller."""

    __slots__ = ("head",)

    def __init__(self) -> None:
        self.head: SlistNode | None = None

    def is_empty(self) -> bool:
        """Whether the list has no nodes."""
        return self.head is None

    def push_front(self, node: SlistNode) -> None:
        """Insert ``node`` at the front."""
        node.next = self.head
        self.head = node

    def pop_front(self) -> SlistNode | None:
        """Unlink and return the first node, or None if the list is empty."""
        head = self.head
        if head is not None:
            self.head = head.next
        return head

    def __iter__(self) -> Iterator[SlistNode]:
        return _walk(self.head)