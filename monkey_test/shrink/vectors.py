"""List shrinkers, shrinking size aggressively before individual elements."""

from __future__ import annotations

import itertools
from collections.abc import Iterator, Sequence
from typing import Any, TypeVar

from ..core import Shrink, shrink_from_fn

E = TypeVar("E")

_MAX_CANDIDATES_PER_ELEMENT = 1000


def eager_size(original: Sequence[E]) -> Iterator[list[E]]:
    """Candidates with ever smaller parts of ``original`` removed.

    First everything is removed, then each half, then each quarter and so on,
    down to each single element.
    """
    data = list(original)
    length = len(data)
    len_to_remove = length
    start = 0
    while len_to_remove > 0:
        yield data[:start] + data[start + len_to_remove:]
        start += len_to_remove
        if start >= length:
            len_to_remove = 0 if len_to_remove == 1 else -(-len_to_remove // 2)
            start = 0


def per_element(
    original: Sequence[E], element_shrinker: Shrink[E]
) -> Iterator[list[E]]:
    """Candidates with one element at a time replaced by its shrink candidates.

    At most 1000 candidates are tried per element.
    """
    data = list(original)
    for index, element in enumerate(data):
        for candidate in itertools.islice(
            element_shrinker.candidates(element), _MAX_CANDIDATES_PER_ELEMENT
        ):
            yield [*data[:index], candidate, *data[index + 1:]]


def default(element_shrinker: Shrink[E]) -> Shrink[list[E]]:
    """List shrinker reducing size first, then shrinking individual elements."""
    return shrink_from_fn(
        lambda original: itertools.chain(
            eager_size(original), per_element(original, element_shrinker)
        )
    )


def no_element_shrinking() -> Shrink[list[Any]]:
    """List shrinker that only reduces the size, leaving elements as they are."""
    return shrink_from_fn(eager_size)