"""Allocators, a bump arena, a growable vector, string slices and a seeded random number generator."""

__version__ = "0.1.0"

__all__ = ["alloc", "arena", "vec", "text", "rng"]