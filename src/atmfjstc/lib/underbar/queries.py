"""
Utilities for asking questions about the contents of a collection.

All of these work on both sequences and mappings. For mappings, only the values are considered.
"""

from typing import Any, Callable, List, TypeVar

from atmfjstc.lib.underbar.iteration import Collection, identity, iter_values


T = TypeVar('T')

Predicate = Callable[[T], Any]


def filter_(collection: Collection, predicate: Predicate) -> List[T]:
    """
    Returns a list of all the values in a collection that pass a truth test.
    """
    return [value for value in iter_values(collection) if predicate(value)]


def reject(collection: Collection, predicate: Predicate) -> List[T]:
    """
    Returns a list of all the values in a collection that do NOT pass a truth test. This is the opposite of `filter_`.
    """
    return filter_(collection, lambda value: not predicate(value))


def contains(collection: Collection, target: Any) -> bool:
    """
    Checks whether any value in a collection is equal to `target`. For mappings, the values are searched, not the keys.
    """
    return any(value == target for value in iter_values(collection))


def every(collection: Collection, predicate: Predicate = identity) -> bool:
    """
    Checks whether all of the values in a collection pass a truth test (by default, whether they are all truthy).

    The predicate is not called anymore after the first failure. An empty collection passes trivially.
    """
    return all(predicate(value) for value in iter_values(collection))


def some(collection: Collection, predicate: Predicate = identity) -> bool:
    """
    Checks whether at least one value in a collection passes a truth test (by default, whether any is truthy).

    The predicate is not called anymore after the first success. An empty collection fails trivially.
    """
    return any(predicate(value) for value in iter_values(collection))
