"""Core type definitions for histostore."""

type Cell[V] = V
"""Type alias for a cell value returned by indexed storage reads.

Dense storages (vector-like and array-like) return the stored object itself,
so a mutable accumulator cell read from them can be updated in place. Sparse
storages always return by value: a copy of the stored cell, or a fresh default
when the index has no entry. Mutating it never touches the storage. To persist
a change uniformly, write back via `storage[i] = cell` or `storage.set(i, cell)`.
"""
