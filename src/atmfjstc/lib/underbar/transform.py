"""
Utilities for transforming collections into new lists or values.

None of these functions modify their input. Those that produce a list always produce a new one, even when the input is
already a list.
"""

import random
import typing

from typing import Any, Callable, Iterable, List, Optional, TypeVar, Union

from atmfjstc.lib.py_lang_utils.token import Token

from atmfjstc.lib.underbar.iteration import Collection, iter_values


T = TypeVar('T')
U = TypeVar('U')

CombineFunc = Callable[[Any, T], Any]
SortKey = Union[Callable[[T], Any], Any]


NO_INITIAL = Token(str_='NO_INITIAL', repr_='NO_INITIAL')
"""Marker for an omitted `initial` argument in `reduce`. Allows None to be used as a genuine starting value."""


def map_(collection: Collection, transformer: Callable[[T], U]) -> List[U]:
    """
    Returns a list of the results of applying a function to each value in a collection (sequence or mapping).
    """
    return [transformer(value) for value in iter_values(collection)]


def pluck(collection: Collection, key: Any) -> List[Any]:
    """
    Extracts a field from each item in a collection of dicts (or other subscriptable items).

    Example::

        pluck([{'name': 'moe', 'age': 40}, {'name': 'curly', 'age': 60}], 'age')  # [40, 60]

    Missing fields are not tolerated: the underlying `KeyError` or `IndexError` will propagate.
    """
    return map_(collection, lambda item: item[key])


def reduce(collection: Collection, combine: CombineFunc, initial: Any = NO_INITIAL) -> Any:
    """
    Reduces a collection to a single value by calling ``combine(accumulator, value)`` for each value, in order. The
    accumulator is the return value of the previous call.

    Args:
        collection: A sequence (list, tuple, stream etc) or a mapping, in which case its values are reduced
        combine: The combining function
        initial: The starting value of the accumulator. If not specified, the first value of the collection is used
            instead, and it is never passed to `combine` as its second argument. None is a valid starting value.

    Returns:
        The final value of the accumulator.

    Raises:
        TypeError: if the collection is empty and no starting value was specified (same as `functools.reduce`)
    """
    values = iter(iter_values(collection))

    accumulator = initial

    if accumulator is NO_INITIAL:
        try:
            accumulator = next(values)
        except StopIteration:
            raise TypeError("reduce() of empty collection with no initial value") from None

    for value in values:
        accumulator = combine(accumulator, value)

    return accumulator


def invoke(collection: Collection, func_or_name: Union[str, Callable], *args, **kwargs) -> List[Any]:
    """
    Calls a method on each item in a collection and returns a list of the results.

    If `func_or_name` is a string, it names the method to call on each item, e.g.
    ``invoke(['a', 'b'], 'upper')  # ['A', 'B']``. Otherwise, it is a function that will be called with each item as
    its first argument, much like an unbound method. Any further arguments are passed along to every call.
    """
    if isinstance(func_or_name, str):
        return map_(collection, lambda item: getattr(item, func_or_name)(*args, **kwargs))

    return map_(collection, lambda item: func_or_name(item, *args, **kwargs))


def sort_by(collection: Collection, key: SortKey) -> List[Any]:
    """
    Returns a list of the values in a collection, sorted in ascending order by some criterion.

    Args:
        collection: A sequence or mapping. It is not modified.
        key: Either a function that computes the sorting criterion for each item, or the name of a field (e.g. a dict
            key) that holds it. Anything that is not callable is treated as a field name.

    Returns:
        The sorted list. The sort is stable. Items that are None, or whose criterion is None, cannot be compared with
        anything, so they are moved to the end of the list, in the order in which they appeared.
    """
    get_criterion = key if callable(key) else (lambda item: item[key])

    sortable = []
    unsortable = []

    for item in iter_values(collection):
        criterion = None if item is None else get_criterion(item)

        if criterion is None:
            unsortable.append(item)
        else:
            sortable.append((criterion, item))

    sortable.sort(key=lambda pair: pair[0])

    return [item for _, item in sortable] + unsortable


def shuffle(seq: Iterable[T], rng: Optional[random.Random] = None) -> List[T]:
    """
    Returns a copy of a sequence, with the elements in random order. The original sequence is not modified.

    Supply a `random.Random` instance in `rng` for reproducible results.
    """
    result = list(seq)

    (rng or random).shuffle(result)

    return result


def iter_flatten(nested: Iterable) -> Iterable[Any]:
    """
    Streams the elements of an arbitrarily nested structure of lists and tuples, depth first.

    Only lists and tuples are descended into. Strings, dicts and all other values are yielded as-is.
    """
    for item in nested:
        if isinstance(item, (list, tuple)):
            yield from iter_flatten(item)
        else:
            yield item


def flatten(nested: Iterable) -> List[Any]:
    """
    Convenience function. Like `iter_flatten()` but returns a list.

    Example::

        flatten([1, [2], [3, [[4]]]])  # [1, 2, 3, 4]
    """
    return list(iter_flatten(nested))


def zip_(*seqs: typing.Sequence) -> List[List[Any]]:
    """
    Zips together sequences, producing a list of lists in which the i-th list holds the i-th element of every sequence.

    Unlike the builtin `zip`, the result is as long as the longest sequence; shorter sequences contribute None once
    exhausted.

    Example::

        zip_(['a', 'b', 'c'], [1, 2])  # [['a', 1], ['b', 2], ['c', None]]
    """
    length = max((len(seq) for seq in seqs), default=0)

    return [[seq[index] if index < len(seq) else None for seq in seqs] for index in range(length)]
