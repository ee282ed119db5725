"""Intrusive singly linked tail queue."""

from __future__ import annotations

from collections.abc import Iterator

from .slist import _Link, _require_owner, _walk


class StailqNode(_Link):
    """A node of a :class:`Stailq`."""

    __slots__ = ()

    def insert_after(self, node: StailqNode, owner: Stailq | None = None) -> None:
        """Link ``node`` after this node.

        ``owner`` is required when this node is the tail, so the queue's tail
        can be updated; ValueError is raised if it is missing then.
        """
        if self.next is None:
            _require_owner(owner).tail = node
        node.next = self.next
        self.next = node

    def remove_after(self, owner: Stailq | None = None) -> StailqNode | None:
        """Unlink and return the following node, or None if this is the tail.

        ``owner`` is required when the removed node is the queue's tail. The
        removed node keeps its own ``next`` link.
        """
        removed = self.next
        if removed is None:
            return None
        if removed.next is None:
            _require_owner(owner).tail = self
        self.next = removed.next
        return removed

    def is_tail(self) -> bool:
        """Whether no node follows this one."""
        return self.next is None


class Stailq:
    """A singly linked queue with access to both ends."""

    __slots__ = ("head", "tail")

    def __init__(self) -> None:
        self.head: StailqNode | None = None
        self.tail: StailqNode | None = None

    def is_empty(self) -> bool:
        """Whether the queue has no nodes."""
        return self.head is None

    def push_front(self, node: StailqNode) -> None:
        """Insert ``node`` at the front."""
        if self.head is None:
            self.tail = node
        node.next = self.head
        self.head = node

    def pop_front(self) -> StailqNode | None:
        """Unlink and return the first node, or None if the queue is empty."""
        head = self.head
        if head is not None:
            self.head = head.next
            if self.head is None:
                self.tail = None
        return head

    def push_back(self, node: StailqNode) -> None:
        """Append ``node`` at the back."""
        node.next = None
        if self.tail is not None:
            self.tail.next = node
        else:
            self.head = node
        self.tail = node

    def __iter__(self) -> Iterator[StailqNode]:
        return _walk(self.head)