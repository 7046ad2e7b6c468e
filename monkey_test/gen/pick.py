"""Picking among fixed values, and mixing generators, by given ratios."""

from __future__ import annotations

import bisect
import itertools
import random
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

from ..core import Gen, gen_from_fn
from ..shrink.basic import none

T = TypeVar("T")
Q = TypeVar("Q")
E = TypeVar("E")

_MAX_RATIO = 255
_EXHAUSTED = object()


class SampleTarget(Generic[T]):
    """Maps samples from the domain ``1..=sample_domain_max()`` to targets.

    Each target covers as many consecutive samples as its ratio, so a target
    with ratio 3 is three times as likely as one with ratio 1 when samples are
    drawn uniformly. Targets with ratio zero are left out.
    """

    def __init__(self, ratios_and_targets: Iterable[tuple[int, T]]) -> None:
        given = list(ratios_and_targets)
        for ratio, _target in given:
            if not isinstance(ratio, int) or not 0 <= ratio <= _MAX_RATIO:
                raise ValueError(
                    f"Ratio {ratio!r} is not an integer in range 0..={_MAX_RATIO}."
                )
        nonzero = [(ratio, target) for ratio, target in given if ratio > 0]
        if not nonzero:
            raise ValueError(
                f"Given argument {given!r} has no target value with non-zero ratio."
            )
        self._ratios = tuple(ratio for ratio, _ in nonzero)
        self._targets = tuple(target for _, target in nonzero)
        self._sample_maxes = tuple(itertools.accumulate(self._ratios))

    @classmethod
    def evenly(cls, targets: Iterable[T]) -> SampleTarget[T]:
        """Sample target where every target is equally likely."""
        return cls((1, target) for target in targets)

    def map(self, f: Callable[[T], Q]) -> SampleTarget[Q]:
        """Sample target with every target transformed, keeping the ratios."""
        return SampleTarget(
            (ratio, f(target)) for ratio, target in zip(self._ratios, self._targets)
        )

    def sample_domain_max(self) -> int:
        """Largest sample of the domain; the smallest is always 1."""
        return self._sample_maxes[-1]

    def target_from_sample(self, sample: int) -> T:
        """Target covering the given sample.

        Raises ValueError if the sample is outside the sample domain.
        """
        if not 1 <= sample <= self.sample_domain_max():
            raise ValueError(
                f"Sample {sample} is not in range 1..={self.sample_domain_max()}."
            )
        return self._targets[bisect.bisect_left(self._sample_maxes, sample)]


def _samples(target: SampleTarget[Any], seed: str) -> Iterator[int]:
    rng = random.Random(seed)
    high = target.sample_domain_max()
    while True:
        yield rng.randint(1, high)


def _pick_with_sample_target(target: SampleTarget[E]) -> Gen[E]:
    return gen_from_fn(
        lambda seed: map(target.target_from_sample, _samples(target, f"pick-{seed}"))
    )


def pick_evenly(examples: Iterable[E]) -> Gen[E]:
    """Pick evenly among the given examples. The generator has no shrinker."""
    return _pick_with_sample_target(SampleTarget.evenly(examples))


def pick_with_ratio(ratios_and_examples: Iterable[tuple[int, E]]) -> Gen[E]:
    """Pick among the given examples with frequencies given by the ratios.

    Ratios are integers in ``0..=255``. The generator has no shrinker.
    """
    return _pick_with_sample_target(SampleTarget(ratios_and_examples))


def _mix_with_sample_target(shrink: Any, target: SampleTarget[Gen[E]]) -> Gen[E]:
    def examples(seed: int) -> Iterator[E]:
        iterators = target.map(lambda gen: gen.examples(seed))
        for sample in _samples(iterators, f"mix-{seed}"):
            value = next(iterators.target_from_sample(sample), _EXHAUSTED)
            # Any inner generator running out ends the whole mix.
            if value is _EXHAUSTED:
                return
            yield value

    return gen_from_fn(examples).with_shrinker(shrink)


def mix_evenly(generators: Sequence[Gen[E]]) -> Gen[E]:
    """Mix examples from the given generators evenly.

    The shrinker of the first generator is used.
    """
    generators = list(generators)
    shrink = generators[0].shrinker() if generators else none()
    return _mix_with_sample_target(shrink, SampleTarget.evenly(generators))


def mix_with_ratio(ratios_and_gens: Sequence[tuple[int, Gen[E]]]) -> Gen[E]:
    """Mix examples from the given generators in the given ratios.

    The shrinker of the first generator is used.
    """
    ratios_and_gens = list(ratios_and_gens)
    shrink = ratios_and_gens[0][1].shrinker() if ratios_and_gens else none()
    return _mix_with_sample_target(shrink, SampleTarget(ratios_and_gens))