"""
Utilities for merging dicts and mappings into one another.
"""

import typing

from typing import TypeVar

from collections.abc import MutableMapping


K = TypeVar('K')
V = TypeVar('V')


def extend(
    target: typing.MutableMapping[K, V], *sources: typing.Mapping[K, V]
) -> typing.MutableMapping[K, V]:
    """
    Copies all the items in the source mapping(s) into a target dict (or other mutable mapping).

    Sources are processed in order, so a key present in several of them gets the value from the last one. Existing
    values in the target are overwritten.

    Args:
        target: The dict to update. It is modified in place.
        *sources: Mappings to copy items from

    Returns:
        The target itself, for convenience.
    """
    _check_target(target, 'extend')

    for source in sources:
        target.update(source)

    return target


def defaults(
    target: typing.MutableMapping[K, V], *sources: typing.Mapping[K, V]
) -> typing.MutableMapping[K, V]:
    """
    Fills in keys missing from a target dict (or other mutable mapping) with items from the source mapping(s).

    This is like `extend`, except that a key already present in the target is never overwritten, even if its value is
    None. Sources are processed in order, so a key present in several of them gets the value from the first one.

    Args:
        target: The dict to update. It is modified in place.
        *sources: Mappings to copy default values from

    Returns:
        The target itself, for convenience.
    """
    _check_target(target, 'defaults')

    for source in sources:
        for key, value in source.items():
            if key not in target:
                target[key] = value

    return target


def _check_target(target, func_name: str):
    if not isinstance(target, MutableMapping):
        raise TypeError(f"{func_name}() target must be a mutable mapping, got {target!r}")
