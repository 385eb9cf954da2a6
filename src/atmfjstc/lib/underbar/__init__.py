"""
A small toolkit of "underscore"-style helpers for working with collections and functions.

The helpers are grouped by theme: iteration primitives (`iteration`), collection queries (`queries`), transformers and
reducers (`transform`), set-like operations on sequences (`sets`), mapping merging (`mappings`) and function decorators
(`decorators`). All of them work on plain in-memory data: lists, tuples, generators and dict-like mappings.
"""


__version__ = '1.0.0'
