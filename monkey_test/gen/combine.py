"""Generator combinators: chaining, mapping, zipping and filtering."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from ..core import Gen, gen_from_fn
from ..shrink import combine as shrink_combine
from ..shrink.combine import _filter_limited
from .integers import seeds

E = TypeVar("E")
E0 = TypeVar("E0")
E1 = TypeVar("E1")


def chained(first_gen: Gen[E], second_gen: Gen[E]) -> Gen[E]:
    """Concatenate two generators.

    The second generator is used only once the first one runs out, so it is
    never used if the first one is infinite. The shrinker of the first
    generator is kept.
    """
    return gen_from_fn(
        lambda seed: itertools.chain(
            first_gen.examples(seed), second_gen.examples(seed)
        )
    ).with_shrinker(first_gen.shrinker())


def mapped(
    gen0: Gen[E0],
    map_fn: Callable[[E0], E1],
    unmap_fn: Callable[[E1], E0],
) -> Gen[E1]:
    """Convert a generator of one type into a generator of another type.

    The unmapping function lets the shrinker of ``gen0`` shrink the mapped
    examples as well.
    """
    shrink = shrink_combine.mapped(gen0.shrinker(), map_fn, unmap_fn)
    return gen_from_fn(lambda seed: map(map_fn, gen0.examples(seed))).with_shrinker(
        shrink
    )


def zipped(g0: Gen[Any], g1: Gen[Any]) -> Gen[tuple]:
    """Combine two generators element wise into a generator of pairs.

    Each part gets its own seed, derived from the given one, so that the same
    generator on both sides does not yield twin values.
    """

    def examples(seed: int) -> Iterator[tuple]:
        part_seeds = seeds().examples(seed)
        seed0 = next(part_seeds)
        seed1 = next(part_seeds)
        return zip(g0.examples(seed0), g1.examples(seed1))

    shrink = shrink_combine.zipped(g0.shrinker(), g1.shrinker())
    return gen_from_fn(examples).with_shrinker(shrink)


def filtered(original_gen: Gen[E], predicate: Callable[[E], bool]) -> Gen[E]:
    """Generator keeping only the examples accepted by the predicate.

    The shrinker is filtered by the same predicate. Iterating the examples
    raises :class:`~monkey_test.shrink.combine.TooHeavyFilteringError` when
    100 examples in a row are rejected.
    """
    shrink = original_gen.shrinker().filter(predicate)
    return gen_from_fn(
        lambda seed: _filter_limited(original_gen.examples(seed), predicate)
    ).with_shrinker(shrink)