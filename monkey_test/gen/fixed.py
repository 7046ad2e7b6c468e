"""Deterministic generators, mainly for testing with known examples."""

from __future__ import annotations

import itertools
from collections.abc import Iterable
from typing import TypeVar

from ..core import Gen, gen_from_fn

E = TypeVar("E")


def sequence(examples: Iterable[E]) -> Gen[E]:
    """Generate the given examples once, in order, and then end."""
    data = tuple(examples)
    return gen_from_fn(lambda _seed: data)


def constant(example: E) -> Gen[E]:
    """Infinite generator always returning the given example."""
    return gen_from_fn(lambda _seed: itertools.repeat(example))


def in_loop(examples: Iterable[E]) -> Gen[E]:
    """Generate the given examples over and over in a loop, regardless of seed.

    Raises ValueError if no examples are given.
    """
    data = tuple(examples)
    if not data:
        raise ValueError("Cannot loop over an empty collection of examples.")
    return gen_from_fn(lambda _seed: itertools.cycle(data))