"""Allocator interfaces and the registry of the default allocator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Allocator(ABC):
    """An allocator handing out addresses in a memory region it owns.

    Failure to allocate is reported by returning None.
    """

    @abstractmethod
    def alloc(self, size: int, align: int) -> int | None:
        """Allocate ``size`` bytes aligned to ``align`` (a power of two)."""

    @abstractmethod
    def dealloc(self, address: int, size: int, align: int) -> None:
        """Release memory; ``size`` and ``align`` must match the allocation."""

    @abstractmethod
    def read(self, address: int, size: int) -> bytes:
        """Return ``size`` bytes stored at ``address``."""

    @abstractmethod
    def write(self, address: int, data: bytes) -> None:
        """Store ``data`` at ``address``."""

    def alloc_zeroed(self, size: int, align: int) -> int | None:
        """Like :meth:`alloc`, but the memory is cleared."""
        address = self.alloc(size, align)
        if address is not None:
            self.write(address, bytes(size))
        return address

    def realloc(self, address: int, old_size: int, new_size: int, align: int) -> int | None:
        """Move an allocation to one of ``new_size`` bytes, keeping its content.

        On success the old memory is released; on failure None is returned
        and the old memory is left untouched.
        """
        if new_size == old_size:
            return address
        new_address = self.alloc(new_size, align)
        if new_address is not None:
            self.write(new_address, self.read(address, min(old_size, new_size)))
            self.dealloc(address, old_size, align)
        return new_address


class AllocatorExt(Allocator):
    """An allocator that can free and resize without being told the size."""

    @abstractmethod
    def dealloc_ext(self, address: int) -> None:
        """Release memory allocated by this allocator."""

    @abstractmethod
    def realloc_ext(self, address: int, new_size: int) -> int | None:
        """Resize an allocation; None on failure, leaving the old one intact."""


class AllocatorState(ABC):
    """Usage figures of an allocator."""

    @abstractmethod
    def total_size(self) -> int:
        """Total managed space."""

    @abstractmethod
    def free_size(self) -> int:
        """Space still available (not necessarily contiguous)."""


@dataclass
class _Registry:
    allocator: Allocator | None = None
    allocator_ext: AllocatorExt | None = None
    state: AllocatorState | None = None


_registry = _Registry()


def register(allocator: Allocator | None) -> None:
    """Make ``allocator`` the default allocator."""
    _registry.allocator = allocator


def register_ext(allocator: AllocatorExt | None) -> None:
    """Make ``allocator`` the default extended allocator."""
    _registry.allocator_ext = allocator


def register_state(state: AllocatorState | None) -> None:
    """Make ``state`` the source of the default allocator's usage figures."""
    _registry.state = state


def get_default() -> Allocator | None:
    """The default allocator, or None if none is registered."""
    return _registry.allocator


def get_default_ext() -> AllocatorExt | None:
    """The default extended allocator, or None if none is registered."""
    return _registry.allocator_ext


def get_default_state() -> AllocatorState | None:
    """The default allocator's usage figures, or None if none are registered."""
    return _registry.state