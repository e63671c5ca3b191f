"""Growable vector whose capacity is drawn from an allocator."""

from __future__ import annotations

from .alloc import StdAllocator

_MIN_CAPACITY = 4


class Vector:
    """A growable sequence that reserves capacity from an allocator.

    Capacity is counted in elements; every reservation takes a block of that
    many bytes from the allocator, so a bounded allocator bounds the vector.
    """

    def __init__(self, allocator=None):
        self._allocator = allocator if allocator is not None else StdAllocator()
        self._block = None
        self._capacity = 0
        self._items = []

    def __repr__(self):
        return f"Vector({self._items!r})"

    def free(self):
        """Release the reserved block and drop all elements."""
        if self._block is not None:
            self._allocator.free(self._block, self._capacity)
            self._block = None
        self._capacity = 0
        self._items.clear()

    def reserve_exact(self, capacity):
        """Ensure room for at least ``capacity`` elements, reserving exactly that."""
        if capacity <= self._capacity:
            return
        block = self._allocator.malloc(capacity)
        if self._block is not None:
            self._allocator.free(self._block, self._capacity)
        self._block = block
        self._capacity = capacity

    def reserve(self, capacity):
        """Ensure room for at least ``capacity`` elements, growing by doubling."""
        new_capacity = max(self._capacity, _MIN_CAPACITY)
        while new_capacity < capacity:
            new_capacity *= 2
        self.reserve_exact(new_capacity)

    def capacity(self):
        """Number of elements the vector can hold without reserving more."""
        return self._capacity

    def __len__(self):
        return len(self._items)

    def _position(self, index):
        length = len(self._items)
        if index < 0:
            index += length
        if not 0 <= index < length:
            raise IndexError("vector index out of range")
        return index

    def __getitem__(self, index):
        return self._items[self._position(index)]

    def push(self, value):
        """Append ``value``, growing the capacity when needed."""
        if len(self._items) + 1 > self._capacity:
            self.reserve(len(self._items) + 1)
        self._items.append(value)

    def pop(self):
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from empty vector")
        return self._items.pop()

    def insert(self, index, value):
        """Put ``value`` at ``index``, moving the element there to the end."""
        position = self._position(index)
        self.push(self._items[position])
        self._items[position] = value

    def remove(self, index):
        """Remove and return the element at ``index``, filling the gap with the last one."""
        position = self._position(index)
        removed = self._items[position]
        self._items[position] = self._items[-1]
        self._items.pop()
        return removed