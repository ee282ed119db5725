"""Intrusive doubly linked list tracked by its head."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .slist import _Link, _require_owner, _walk


class ListNode(_Link):
    """A node of a :class:`List`."""

    __slots__ = ("prev",)

    def __init__(self, element: Any) -> None:
        super().__init__(element)
        self.prev: ListNode | None = None

    def insert_before(self, node: ListNode, owner: List | None = None) -> None:
        """Link ``node`` before this node; ``owner`` is required if this is the head."""
        if self.prev is None:
            _require_owner(owner).head = node
        else:
            self.prev.next = node
        node.prev = self.prev
        node.next = self
        self.prev = node

    def insert_after(self, node: ListNode) -> None:
        """Link ``node`` after this node."""
        node.next = self.next
        node.prev = self
        if self.next is not None:
            self.next.prev = node
        self.next = node

    def remove_before(self, owner: List | None = None) -> ListNode | None:
        """Unlink and return the preceding node, or None if this is the head.

        ``owner`` is required when the removed node is the list's head. The
        removed node keeps its own links.
        """
        removed = self.prev
        if removed is None:
            return None
        if removed.prev is None:
            _require_owner(owner).head = self
        else:
            removed.prev.next = self
        self.prev = removed.prev
        return removed

    def remove(self, owner: List | None = None) -> None:
        """Unlink this node; its own links are left as they were.

        ``owner`` is required when this node is the head.
        """
        if self.prev is None:
            _require_owner(owner).head = self.next
        else:
            self.prev.next = self.next
        if self.next is not None:
            self.next.prev = self.prev

    def remove_after(self) -> ListNode | None:
        """Unlink and return the following node, or None if this is the tail."""
        removed = self.next
        if removed is not None:
            self.next = removed.next
            if self.next is not None:
                self.next.prev = self
        return removed

    def is_tail(self) -> bool:
        """Whether no node follows this one."""
        return self.next is None

    def is_head(self) -> bool:
        """Whether no node precedes this one."""
        return self.prev is None

    def is_alone(self) -> bool:
        """Whether the node is linked to nothing."""
        return self.prev is None and self.next is None

    def set_alone(self) -> None:
        """Clear both links."""
        self.prev = None
        self.next = None


class List:
    """A doubly linked list of :class:`ListNode` objects."""

    __slots__ = ("head",)

    def __init__(self) -> None:
        self.head: ListNode | None = None

    def is_empty(self) -> bool:
        """Whether the list has no nodes."""
        return self.head is None

    def push_front(self, node: ListNode) -> None:
        """Insert ``node`` at the front."""
        node.prev = None
        node.next = self.head
        if self.head is not None:
            self.head.prev = node
        self.head = node

    def pop_front(self) -> ListNode | None:
        """Unlink and return the first node, or None if the list is empty."""
        head = self.head
        if head is not None:
            self.head = head.next
            if self.head is not None:
                self.head.prev = None
        return head

    def __iter__(self) -> Iterator[ListNode]:
        return _walk(self.head)