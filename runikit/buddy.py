"""Buddy allocator over a simulated memory region.

Free blocks of each order are kept in circular doubly linked lists. The
allocation state of every block is tracked in a tree-shaped bitset: entry 0
is the root, ``2*i+1`` and ``2*i+2`` are the halves of ``i``. A set bit means
the block is allocated or has been split; a clear bit means it is free or its
parent is allocated. The bitset lives at the end of the managed region, so
that part of the region is not handed out. A region whose size is not a
power of two is treated as a larger one whose trailing blocks are in use.
"""

from __future__ import annotations

import threading

from runikit.alloc import AllocatorExt, AllocatorState
from runikit.config import default_config

MIN_ORDER = 4
MAX_ORDER = 48
MIN_SIZE = 1 << MIN_ORDER
MAX_SIZE = 1 << MAX_ORDER
PAGE_ALIGNMENT = default_config().page_size

_BITS_PER_WORD = 64


def log2_floor(value: int) -> int:
    """``floor(log2(value))``; 0 for values below 2."""
    return max(value.bit_length() - 1, 0)


def min_power2(value: int) -> int:
    """The smallest power of two that is not below ``value`` (2 for 0)."""
    exponent = log2_floor(value)
    if 1 << exponent == value:
        return value
    return 1 << (exponent + 1)


def find_n_meta(total_blocks: int) -> int:
    """Number of 16-byte blocks needed for the metadata of ``total_blocks`` blocks.

    It is the least ``m`` such that the bitset held in ``m`` blocks covers the
    index of the last allocatable block among the remaining ``total_blocks - m``.
    """

    def enough(meta: int) -> bool:
        data = total_blocks - meta
        return meta >= (min_power2(data) - 2 + data) // 128 + 1

    low, high = total_blocks // 65, (total_blocks + 42) // 43
    while low != high:
        mid = (low + high) >> 1
        if enough(mid):
            high = mid
        else:
            low = mid + 1
    return low


def _lchild(i: int) -> int:
    return i * 2 + 1


def _rchild(i: int) -> int:
    return i * 2 + 2


def _parent(i: int) -> int:
    return (i - 1) // 2


def _sibling(i: int) -> int:
    return ((i - 1) ^ 1) + 1


class _Bitset:
    """A fixed-capacity bitset; bits past the end read as clear."""

    def __init__(self, words: int) -> None:
        self._capacity = words * _BITS_PER_WORD
        self._bits: set[int] = set()

    def __getitem__(self, index: int) -> bool:
        return index < self._capacity and index in self._bits

    def __setitem__(self, index: int, value: bool) -> None:
        if index >= self._capacity:
            raise IndexError(f"metadata index {index} out of range")
        if value:
            self._bits.add(index)
        else:
            self._bits.discard(index)


class BuddyAllocator(AllocatorExt, AllocatorState):
    """A buddy allocator managing ``size`` bytes starting at address ``base``."""

    def __init__(self, size: int, base: int = 0) -> None:
        if size < 0 or size % MIN_SIZE:
            raise ValueError(f"size must be a non-negative multiple of {MIN_SIZE}")
        if size > MAX_SIZE:
            raise ValueError(f"size must not exceed {MAX_SIZE}")
        if base < 0 or base % PAGE_ALIGNMENT:
            raise ValueError(f"base must be aligned to {PAGE_ALIGNMENT}")

        n_blocks = size // MIN_SIZE
        n_meta_blocks = find_n_meta(n_blocks)
        data_size = (n_blocks - n_meta_blocks) * MIN_SIZE

        self._lock = threading.Lock()
        self._base = base
        self._memory = bytearray(data_size)
        self._size_data = data_size
        self._size_left = data_size
        self._size_total = size
        self._max_order = log2_floor(data_size)
        self._root_order = (
            self._max_order if 1 << self._max_order == data_size else self._max_order + 1
        )
        self._meta = _Bitset(n_meta_blocks * 2)
        self._heads: list[int | None] = [None] * (MAX_ORDER - MIN_ORDER + 1)
        self._pre: dict[int, int] = {}
        self._next: dict[int, int] = {}

        offset, remaining = 0, data_size
        while remaining > 0:
            order = log2_floor(remaining)
            self._init_node(offset)
            self._heads[order - MIN_ORDER] = offset
            offset += 1 << order
            remaining -= 1 << order

    # free lists

    def _init_node(self, node: int) -> None:
        self._pre[node] = node
        self._next[node] = node

    def _insert_node(self, order: int, node: int) -> None:
        head = self._heads[order - MIN_ORDER]
        if head is None:
            self._init_node(node)
            self._heads[order - MIN_ORDER] = node
        else:
            following = self._next[head]
            self._next[node] = following
            self._next[head] = node
            self._pre[following] = node
            self._pre[node] = head

    def _remove_node(self, order: int, node: int) -> None:
        pre, following = self._pre.pop(node), self._next.pop(node)
        if following == node:
            self._heads[order - MIN_ORDER] = None
        else:
            self._next[pre] = following
            self._pre[following] = pre
            self._heads[order - MIN_ORDER] = pre

    def _traverse(self, order: int) -> list[int]:
        head = self._heads[order - MIN_ORDER]
        if head is None:
            return []
        nodes = [head]
        node = self._next[head]
        limit = self._size_total
        while node != head:
            nodes.append(node)
            node = self._next[node]
            if len(nodes) > limit:
                raise RuntimeError("free list is corrupted")
        return nodes

    # block bookkeeping

    def _index(self, offset: int, order: int) -> int:
        return (1 << (self._root_order - order)) - 1 + offset // (1 << order)

    def _alloc_block(self, size: int) -> int | None:
        log2size = log2_floor(size)
        order = log2size
        while order <= self._max_order and self._heads[order - MIN_ORDER] is None:
            order += 1
        if order > self._max_order:
            return None

        block = self._heads[order - MIN_ORDER]
        self._remove_node(order, block)
        while order != log2size:
            order -= 1
            self._split(block, order)
        self._meta[self._index(block, order)] = True

        self._memory[block:block + MIN_SIZE] = bytes(MIN_SIZE)
        self._size_left -= size
        return block

    def _dealloc_block(self, block: int, size: int) -> None:
        order = log2_floor(size)
        i = self._index(block, order)
        self._meta[i] = False
        while i != 0 and not self._meta[_sibling(i)] and self._meta[_parent(i)]:
            block = self._merge(block, order, i)
            order += 1
            i = _parent(i)
        self._insert_node(order, block)
        self._size_left += size

    def _split(self, block: int, order: int) -> None:
        """Split ``block`` of order ``order + 1``; its upper half becomes free."""
        self._meta[self._index(block, order + 1)] = True
        upper = block + (1 << order)
        self._init_node(upper)
        self._heads[order - MIN_ORDER] = upper

    def _merge(self, block: int, order: int, i: int) -> int:
        """Merge ``block`` with its free buddy and return the merged block."""
        if i % 2 == 1:
            buddy = block + (1 << order)
            merged = block
        else:
            buddy = block - (1 << order)
            merged = buddy
        self._remove_node(order, buddy)
        self._meta[_parent(i)] = False
        return merged

    def _size_when_allocated(self, address: int) -> int:
        if address % MIN_SIZE:
            raise ValueError(f"address {address:#x} is not correctly aligned")
        offset = self._offset(address)
        for order in reversed(range(MIN_ORDER, self._root_order)):
            if address % (1 << order):
                continue
            if offset + (1 << order) > self._size_data:
                continue
            if not self._meta[self._index(offset, order)]:
                return 1 << (order + 1)
        return MIN_SIZE

    def _offset(self, address: int) -> int:
        offset = address - self._base
        if offset < 0 or offset >= self._size_data:
            raise ValueError(f"address {address:#x} is outside the managed region")
        return offset

    @staticmethod
    def _check_align(align: int) -> None:
        if align <= 0 or align & (align - 1):
            raise ValueError(f"alignment {align} is not a power of two")

    # public interface

    def alloc(self, size: int, align: int) -> int | None:
        """Allocate ``size`` bytes aligned to ``align``; None when out of memory."""
        self._check_align(align)
        if align > PAGE_ALIGNMENT:
            raise ValueError(f"alignment must not exceed {PAGE_ALIGNMENT}")
        if size < 0:
            raise ValueError("size must not be negative")
        block_size = min_power2(max(size, align, MIN_SIZE))
        with self._lock:
            if self._size_left < block_size:
                return None
            block = self._alloc_block(block_size)
        return None if block is None else self._base + block

    def dealloc(self, address: int | None, size: int, align: int) -> None:
        """Release an allocation; ``size`` and ``align`` must match it."""
        if address is None:
            return
        self._check_align(align)
        block_size = min_power2(max(size, align, MIN_SIZE))
        offset = self._offset(address)
        with self._lock:
            self._dealloc_block(offset, block_size)

    def dealloc_ext(self, address: int | None) -> None:
        """Release an allocation, working out its size from the metadata."""
        if address is None:
            return
        size = self._size_when_allocated(address)
        with self._lock:
            self._dealloc_block(address - self._base, size)

    def realloc_ext(self, address: int | None, new_size: int) -> int | None:
        """Resize an allocation without being told its old size."""
        if address is None:
            return self.alloc(new_size, MIN_SIZE)
        old_size = self._size_when_allocated(address)
        return self.realloc(address, old_size, new_size, MIN_SIZE)

    def total_size(self) -> int:
        """Size of the whole region, metadata included."""
        return self._size_total

    def free_size(self) -> int:
        """Bytes not currently allocated."""
        return self._size_left

    def free_lists(self) -> dict[int, list[int]]:
        """Addresses of the free blocks of every order, in list order."""
        with self._lock:
            return {
                order: [self._base + node for node in self._traverse(order)]
                for order in range(MIN_ORDER, self._root_order + 1)
            }

    def read(self, address: int, size: int) -> bytes:
        """Return ``size`` bytes stored at ``address``."""
        offset = self._offset(address)
        if size < 0 or offset + size > self._size_data:
            raise ValueError("read past the end of the managed region")
        return bytes(self._memory[offset:offset + size])

    def write(self, address: int, data: bytes) -> None:
        """Store ``data`` at ``address``."""
        offset = self._offset(address)
        if offset + len(data) > self._size_data:
            raise ValueError("write past the end of the managed region")
        self._memory[offset:offset + len(data)] = data

    def __str__(self) -> str:
        lines = ["free_list_head:"]
        for order, blocks in self.free_lists().items():
            if not blocks:
                lines.append(f"#{order}: (empty)")
            else:
                units = ", ".join(str((a - self._base) // MIN_SIZE) for a in blocks)
                lines.append(f"#{order}: [ {units} ]")
        return "\n".join(lines) + "\n"