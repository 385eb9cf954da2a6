"""
Primitives for iterating over collections, i.e. sequences (lists, tuples, streams etc.) and mappings alike.

Most of the other modules in this package are built on `iter_entries`, which is what makes them accept both kinds of
collection: a mapping is walked as its values keyed by mapping key, anything else as its items keyed by position.
"""

import typing

from typing import Any, Callable, Iterable, Optional, Tuple, TypeVar, Union

from collections.abc import Mapping

from atmfjstc.lib.py_lang_utils.searching import index_where


T = TypeVar('T')

Collection = Union[typing.Mapping[Any, T], Iterable[T]]
Visitor = Callable[[T, Any, Collection], Any]


def identity(value: T) -> T:
    """
    Returns whatever value is passed as the argument. Useful as a default for callback parameters.
    """
    return value


def iter_entries(collection: Collection) -> Iterable[Tuple[Any, Any]]:
    """
    Iterates over a collection, yielding ``(value, key)`` pairs.

    For a mapping, the key is the mapping key and the value is the one stored under it. For any other iterable (list,
    tuple, generator etc.), the key is the 0-based position of the value. Streams of any length can be handled, even
    infinite ones.
    """
    if isinstance(collection, Mapping):
        for key, value in collection.items():
            yield value, key
    else:
        for index, value in enumerate(collection):
            yield value, index


def iter_values(collection: Collection) -> Iterable[Any]:
    """
    Like `iter_entries`, but only yields the values.
    """
    return collection.values() if isinstance(collection, Mapping) else collection


def each(collection: Collection, visitor: Visitor) -> None:
    """
    Calls ``visitor(value, key, collection)`` for each element of a collection, in order.

    The key is the mapping key for mappings, and the index for everything else (see `iter_entries`).
    """
    for value, key in iter_entries(collection):
        visitor(value, key, collection)


def first(seq: typing.Sequence[T], n: Optional[int] = None) -> Union[T, typing.List[T]]:
    """
    Returns the first element of a sequence, or, if `n` is given, a list of the first `n` elements.

    Asking for more elements than there are simply returns all of them. Asking for the single first element of an empty
    sequence raises `IndexError`, just like ``seq[0]``.
    """
    if n is None:
        return seq[0]

    _check_count(n)

    return list(seq[:n])


def last(seq: typing.Sequence[T], n: Optional[int] = None) -> Union[T, typing.List[T]]:
    """
    Returns the last element of a sequence, or, if `n` is given, a list of the last `n` elements.

    Note that ``last(seq, 0)`` is an empty list, not the whole sequence as a naive ``seq[-0:]`` would give.
    """
    if n is None:
        return seq[-1]

    _check_count(n)

    return list(seq[-n:]) if n > 0 else []


def index_of(seq: Iterable[T], target: Any) -> int:
    """
    Returns the index of the first element in a sequence that is equal to `target`, or -1 if there is no such element.

    Unlike `list.index()`, this works on any iterable and does not raise if the target is missing.
    """
    index = index_where(seq, lambda item: item == target)

    return -1 if index is None else index


def _check_count(n: int):
    if n < 0:
        raise ValueError(f"Element count must be non-negative, got {n!r}")
