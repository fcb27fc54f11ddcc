"""Small teaching programs and data structures: a register VM, heaps, sorting, float layouts, number types, a bit set, a hash table and a temp-file shell."""

__version__ = "0.1.0"