"""Generators of lists, whose lengths tend to grow along the examples."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from typing import TypeVar

from ..core import Gen, gen_from_fn
from ..shrink import vectors as shrink_vectors
from . import sized
from .integers import seeds

E = TypeVar("E")


def any(element_gen: Gen[E]) -> Gen[list[E]]:  # noqa: A001
    """Lists filled with values from the given element generator.

    Later examples tend to be longer than earlier ones. Each list draws its
    elements with a seed of its own. The shrinker reduces the size first and
    then shrinks the elements with the element generator's shrinker.
    """

    def examples(seed: int) -> Iterator[list[E]]:
        sizes = sized.default().examples(seed)
        list_seeds = seeds().examples(seed)
        for size, list_seed in zip(sizes, list_seeds):
            yield list(itertools.islice(element_gen.examples(list_seed), size))

    return gen_from_fn(examples).with_shrinker(
        shrink_vectors.default(element_gen.shrinker())
    )