"""Intrusive doubly linked tail queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


def _require(owner: Tailq | None) -> Tailq:
    if owner is None:
        raise ValueError("the owning queue is needed for this operation")
    return owner


class TailqNode:
    """A node of a :class:`Tailq`."""

    __slots__ = ("element", "prev", "next")

    def __init__(self, element: Any) -> None:
        self.element = element
        self.prev: TailqNode | None = None
        self.next: TailqNode | None = None

    def __repr__(self) -> str:
        return f"TailqNode({self.element!r})"

    def insert_before(self, node: TailqNode, owner: Tailq | None = None) -> None:
        """Link ``node`` before this node; ``owner`` is required if this is the head."""
        if self.prev is None:
            _require(owner).head = node
        else:
            self.prev.next = node
        node.prev = self.prev
        node.next = self
        self.prev = node

    def insert_after(self, node: TailqNode, owner: Tailq | None = None) -> None:
        """Link ``node`` after this node; ``owner`` is required if this is the tail."""
        if self.next is None:
            _require(owner).tail = node
        else:
            self.next.prev = node
        node.next = self.next
        node.prev = self
        self.next = node

    def remove_before(self, owner: Tailq | None = None) -> TailqNode | None:
        """Unlink and return the preceding node, or None if this is the head.

        ``owner`` is required when the removed node is the queue's head. The
        removed node keeps its own links.
        """
        removed = self.prev
        if removed is None:
            return None
        if removed.prev is None:
            _require(owner).head = self
        else:
            removed.prev.next = self
        self.prev = removed.prev
        return removed

    def remove(self, owner: Tailq | None = None) -> None:
        """Unlink this node; its own links are left as they were.

        ``owner`` is required when this node is the head or the tail.
        """
        if (self.prev is None or self.next is None) and owner is None:
            _require(owner)
        if self.prev is None:
            owner.head = self.next
        else:
            self.prev.next = self.next
        if self.next is None:
            owner.tail = self.prev
        else:
            self.next.prev = self.prev

    def remove_after(self, owner: Tailq | None = None) -> TailqNode | None:
        """Unlink and return the following node, or None if this is the tail.

        ``owner`` is required when the removed node is the queue's tail.
        """
        removed = self.next
        if removed is None:
            return None
        if removed.next is None:
            _require(owner).tail = self
        else:
            removed.next.prev = self
        self.next = removed.next
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


class Tailq:
    """A doubly linked queue with access to both ends."""

    __slots__ = ("head", "tail")

    def __init__(self) -> None:
        self.head: TailqNode | None = None
        self.tail: TailqNode | None = None

    def is_empty(self) -> bool:
        """Whether the queue has no nodes."""
        return self.head is None

    def push_front(self, node: TailqNode) -> None:
        """Insert ``node`` at the front."""
        node.prev = None
        node.next = self.head
        if self.head is not None:
            self.head.prev = node
        else:
            self.tail = node
        self.head = node

    def pop_front(self) -> TailqNode | None:
        """Unlink and return the first node, or None if the queue is empty."""
        head = self.head
        if head is not None:
            self.head = head.next
            if self.head is not None:
                self.head.prev = None
            else:
                self.tail = None
        return head

    def push_back(self, node: TailqNode) -> None:
        """Append ``node`` at the back."""
        node.next = None
        node.prev = self.tail
        if self.tail is not None:
            self.tail.next = node
        else:
            self.head = node
        self.tail = node

    def pop_back(self) -> TailqNode | None:
        """Unlink and return the last node, or None if the queue is empty."""
        tail = self.tail
        if tail is not None:
            self.tail = tail.prev
            if self.tail is not None:
                self.tail.next = None
            else:
                self.head = None
        return tail

    def __iter__(self) -> Iterator[TailqNode]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following