"""Pluggable allocators that hand out zero-filled byte blocks."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Allocator(ABC):
    """One entry point that allocates, resizes and frees byte blocks.

    ``alloc(None, 0, n)`` allocates a block of ``n`` bytes,
    ``alloc(block, old, 0)`` releases ``block`` and any other call resizes it.
    """

    @abstractmethod
    def alloc(self, block, old, new):
        """Allocate, resize or free ``block`` depending on the arguments."""

    def malloc(self, size):
        """Return a fresh block of ``size`` bytes."""
        return self.alloc(None, 0, size)

    def realloc(self, block, old, new):
        """Resize ``block`` from ``old`` to ``new`` bytes and return it."""
        return self.alloc(block, old, new)

    def free(self, block, old):
        """Release ``block``, which was ``old`` bytes long."""
        self.alloc(block, old, 0)


class StdAllocator(Allocator):
    """General purpose allocator backed by ``bytearray`` objects."""

    def alloc(self, block, old, new):
        if new < 0:
            raise ValueError(f"cannot allocate a negative size: {new}")
        if block is None:
            return bytearray(new)
        if new == 0:
            return None
        current = len(block)
        if new < current:
            del block[new:]
        else:
            block.extend(bytes(new - current))
        return block