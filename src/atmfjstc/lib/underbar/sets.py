"""
Set-like operations on sequences.

Unlike their counterparts on the builtin `set`, these preserve the order of the elements and also work with unhashable
elements (e.g. lists or dicts), which are compared by equality instead.
"""

import typing

from typing import Any, Callable, Iterable, List, Optional, TypeVar

from collections.abc import Hashable

from atmfjstc.lib.underbar.queries import contains


T = TypeVar('T')

KeyFunc = Callable[[T], Any]


def iter_uniq(seq: Iterable[T], key: Optional[KeyFunc] = None) -> Iterable[T]:
    """
    Lazily drops every element of an iterable that equals one already produced, so only first occurrences remain, in
    their original order.

    Elements whose identity can be hashed are checked against a set. Anything else (lists, dicts, tuples holding lists
    etc.) falls back to a linear scan by equality, which is slower, but means no element is ever rejected for being
    unhashable. The `key` parameter, if given, maps each element to the identity used for these checks.
    """
    get_key = key or (lambda x: x)
    seen_hashable = set()
    seen_other = []

    for item in seq:
        item_key = get_key(item)
        is_new = None

        if isinstance(item_key, Hashable):
            try:
                is_new = item_key not in seen_hashable
                if is_new:
                    seen_hashable.add(item_key)
            except TypeError:
                is_new = None  # Hashable on the outside, but e.g. a tuple holding a list

        if is_new is None:
            is_new = item_key not in seen_other
            if is_new:
                seen_other.append(item_key)

        if is_new:
            yield item


def uniq(seq: Iterable[T], key: Optional[KeyFunc] = None) -> List[T]:
    """
    Eager form of `iter_uniq()`: collects the first occurrences into a new list.

    Example::

        uniq([[1], 2, [1], 2, 3])  # [[1], 2, 3]
    """
    return list(iter_uniq(seq, key=key))


def intersection(*seqs: typing.Sequence[T]) -> List[T]:
    """
    Returns the elements that are present in all of the given sequences.

    The result follows the order of the first sequence and contains no duplicates. Called with no sequences at all, it
    returns an empty list.
    """
    if len(seqs) == 0:
        return []

    head, *rest = seqs

    return [item for item in iter_uniq(head) if all(contains(other, item) for other in rest)]


def difference(seq: Iterable[T], *others: typing.Sequence[T]) -> List[T]:
    """
    Returns the elements of a sequence that are not present in any of the other sequences given.

    The order of the elements is preserved, and so are any duplicates in the first sequence.
    """
    return [item for item in seq if not any(contains(other, item) for other in others)]
