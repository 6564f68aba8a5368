"""Flat coordinate array boundary for foreign callers."""

from .codec import decode_cells, encode_cells, evolve

__all__ = ['decode_cells', 'encode_cells', 'evolve']
