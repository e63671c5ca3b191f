"""Bump allocator carving aligned slices out of one preallocated block."""

from __future__ import annotations

from .alloc import Allocator

_ALIGN = 16


class Arena:
    """A fixed-size region from which aligned chunks are handed out in order."""

    def __init__(self, allocator, size):
        self._allocator = allocator
        self._buf = allocator.malloc(size)
        self._end = size
        self._offset = 0

    def alloc(self, size):
        """Return a writable view of ``size`` bytes aligned to 16 bytes.

        Raises ``MemoryError`` when the arena cannot hold the request.
        """
        if self._buf is None:
            raise ValueError("arena has been freed")
        if size < 0:
            raise ValueError(f"cannot allocate a negative size: {size}")
        aligned = (self._offset + _ALIGN - 1) & ~(_ALIGN - 1)
        new_offset = aligned + size
        if new_offset >= self._end:
            raise MemoryError(f"arena exhausted: cannot allocate {size} bytes")
        self._offset = new_offset
        return memoryview(self._buf)[aligned:new_offset]

    def free(self):
        """Return the backing block to the allocator it came from."""
        if self._buf is not None:
            self._allocator.free(self._buf, self._end)
            self._buf = None

    def allocator(self):
        """Return an allocator that draws its blocks from this arena."""
        return ArenaAllocator(self)


class ArenaAllocator(Allocator):
    """Allocator view of an arena; freeing is a no-op and resizing copies nothing."""

    def __init__(self, arena):
        self._arena = arena

    def alloc(self, block, old, new):
        if new == 0:
            return None
        return self._arena.alloc(new)