"""Shrinker combinators: filtering, mapping and zipping."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

from ..core import Shrink, shrink_from_fn

E = TypeVar("E")
E0 = TypeVar("E0")
E1 = TypeVar("E1")

_MAX_FILTER_STREAK = 100


class TooHeavyFilteringError(RuntimeError):
    """Raised when too many values in a row are rejected by a filter."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Too heavy filtering. Filtered out 100 examples in a row. "
            "For test performance, please use more efficient way to generate "
            "examples than heavy reliance on filtering."
        )


def _filter_limited(
    values: Iterable[E], predicate: Callable[[E], bool]
) -> Iterator[E]:
    """Yield accepted values, raising if 100 values in a row are rejected."""
    streak = 0
    for value in values:
        if predicate(value):
            streak = 0
            yield value
        else:
            streak += 1
            if streak >= _MAX_FILTER_STREAK:
                raise TooHeavyFilteringError()


def filtered(original_shrink: Shrink[E], predicate: Callable[[E], bool]) -> Shrink[E]:
    """Shrinker keeping only the candidates accepted by the predicate.

    Iterating the candidates raises :class:`TooHeavyFilteringError` when 100
    candidates in a row are rejected.
    """
    return shrink_from_fn(
        lambda original: _filter_limited(
            original_shrink.candidates(original), predicate
        )
    )


def mapped(
    shrink0: Shrink[E0],
    map_fn: Callable[[E0], E1],
    unmap_fn: Callable[[E1], E0],
) -> Shrink[E1]:
    """Convert a shrinker of one type into a shrinker of another type.

    The original example is unmapped, shrunk with ``shrink0``, and each
    candidate is mapped back again.
    """
    return shrink_from_fn(
        lambda original: map(map_fn, shrink0.candidates(unmap_fn(original)))
    )


def zipped(shrink0: Shrink[Any], shrink1: Shrink[Any]) -> Shrink[tuple]:
    """Combine two shrinkers into a shrinker of pairs.

    Candidates shrink the left part, then the right part, then both together.
    """

    def candidates(original: tuple) -> Iterator[tuple]:
        o0, o1 = original
        left = ((c0, o1) for c0 in shrink0.candidates(o0))
        right = ((o0, c1) for c1 in shrink1.candidates(o1))
        both = zip(shrink0.candidates(o0), shrink1.candidates(o1))
        return itertools.chain(left, right, both)

    return shrink_from_fn(candidates)