import pytest

from ocikit.alloc import Allocator, StdAllocator
from ocikit.arena import Arena, ArenaAllocator


class RecordingAllocator(Allocator):
    def __init__(self):
        self.freed = []

    def alloc(self, block, old, new):
        if new == 0:
            self.freed.append(block)
            return None
        return bytearray(new)


def test_alloc_returns_zeroed_view_of_requested_size():
    arena = Arena(StdAllocator(), 128)
    chunk = arena.alloc(10)
    assert len(chunk) == 10
    assert bytes(chunk) == bytes(10)


def test_allocations_do_not_overlap():
    arena = Arena(StdAllocator(), 128)
    first = arena.alloc(20)
    second = arena.alloc(20)
    first[:] = b"\xff" * 20
    assert bytes(second) == bytes(20)
    second[:] = b"\x01" * 20
    assert bytes(first) == b"\xff" * 20


def test_request_that_would_reach_the_end_fails():
    arena = Arena(StdAllocator(), 16)
    with pytest.raises(MemoryError):
        arena.alloc(16)
    assert len(arena.alloc(15)) == 15


def test_second_allocation_is_aligned():
    small = Arena(StdAllocator(), 17)
    small.alloc(1)
    with pytest.raises(MemoryError):
        small.alloc(1)

    roomy = Arena(StdAllocator(), 18)
    roomy.alloc(1)
    assert len(roomy.alloc(1)) == 1


def test_free_returns_block_to_allocator_and_disables_arena():
    recorder = RecordingAllocator()
    arena = Arena(recorder, 64)
    arena.alloc(4)
    arena.free()
    assert len(recorder.freed) == 1
    assert len(recorder.freed[0]) == 64
    with pytest.raises(ValueError):
        arena.alloc(1)


def test_arena_allocator_draws_from_arena():
    arena = Arena(StdAllocator(), 64)
    alloc = arena.allocator()
    assert isinstance(alloc, ArenaAllocator)
    block = alloc.malloc(8)
    assert len(block) == 8
    assert alloc.free(block, 8) is None
    with pytest.raises(MemoryError):
        alloc.malloc(64)


def test_arena_allocator_realloc_returns_fresh_block():
    arena = Arena(StdAllocator(), 256)
    alloc = ArenaAllocator(arena)
    block = alloc.malloc(4)
    block[:] = b"abcd"
    bigger = alloc.realloc(block, 4, 8)
    assert len(bigger) == 8
    assert bytes(block) == b"abcd"