# ocikit

A small toolkit of building blocks:

- `ocikit.alloc`: the abstract `Allocator`, whose single `alloc(block, old, new)`
  method allocates (`block` is `None`), frees (`new` is 0) or resizes a block.
  `malloc`, `realloc` and `free` are helpers built on it. `StdAllocator`
  hands out zero-filled `bytearray` blocks and raises `ValueError` for a
  negative size.
- `ocikit.arena`: `Arena(allocator, size)` takes one block of `size` bytes and
  hands out slices of it in order. `Arena.alloc(size)` returns a writable
  `memoryview` aligned to 16 bytes within the block and raises `MemoryError`
  when the request would reach the end of the arena. `Arena.free()` returns
  the block to its allocator; allocating afterwards raises `ValueError`.
  `Arena.allocator()` returns an `ArenaAllocator`, so an arena can back
  anything that takes an allocator; freeing through it does nothing.
- `ocikit.vec`: `Vector`, a growable sequence. Its capacity, counted in
  elements, is reserved as a block of that many bytes from an allocator
  (a `StdAllocator` if none is given), so a bounded allocator such as an arena
  bounds the vector. `reserve` starts at 4 and doubles; `reserve_exact`
  reserves exactly the amount asked. `push`, `pop`, indexing (negative indices
  allowed) and `len()` work as expected. `insert(index, value)` moves the
  element at `index` to the end and puts `value` in its place;
  `remove(index)` returns the element and fills its place with the last one.
  `pop` on an empty vector and out-of-range indices raise `IndexError`.
- `ocikit.text`: `Str`, a read-only view over part of a string that supports
  `split(mid)` and trimming of spaces, tabs and line breaks (`trim_start`,
  `trim_end`, `trim`); `String`, an owned string you can `append` to; and
  `concat`, which joins two values into a new `String`.
- `ocikit.rng`: `Rng(seed)`, a small deterministic generator. `next()` returns
  a float in `[0, 1)`, `range(x0, x1)` a float between the bounds and
  `irange(x0, x1)` that value truncated toward zero to an integer.

## Installation

```
pip install ocikit
```

## Usage

```python
from ocikit.alloc import StdAllocator
from ocikit.arena import Arena
from ocikit.vec import Vector
from ocikit.text import Str, String, concat
from ocikit.rng import Rng

vec = Vector(StdAllocator())
for value in (10, 20, 30, 40):
    vec.push(value)
assert len(vec) == 4 and vec[0] == 10
assert vec.pop() == 40

arena = Arena(StdAllocator(), 256)
chunk = arena.alloc(32)          # 32-byte writable memoryview
bounded = Vector(arena.allocator())
bounded.push("x")                # capacity drawn from the arena
arena.free()

padded = Str.of(" \t\n  hello  \n\t ")
assert padded.trim() == Str.of("hello")

left, right = Str.of("leftright").split(4)
assert str(left) == "left" and str(right) == "right"

greeting = String("hello")
greeting.append(Str.of(", world"))
assert str(greeting) == "hello, world"
assert str(concat(Str.of("foo"), Str.of("bar"))) == "foobar"

rng = Rng(42)
x = rng.range(0.0, 1.0)      # float in [0, 1)
n = rng.irange(1, 7)         # integer from 1 to 6
```

The same seed always produces the same sequence from `Rng`.

## Limitations

The allocators only account for storage; `Vector` keeps its elements as
ordinary Python objects and uses the allocator's blocks to bound its capacity,
not to hold the elements. `Rng` is not suitable for cryptographic use.

## Running the tests

```
pip install ocikit[test]
pytest
```