"""Generator and shrinker abstractions that all other modules build upon."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

E = TypeVar("E")
E1 = TypeVar("E1")


class Shrink(ABC, Generic[E]):
    """Produces smaller candidate examples from an original failing example."""

    @abstractmethod
    def candidates(self, original: E) -> Iterator[E]:
        """Return an iterator of smaller examples, given an original example."""

    def zip(self, other_shrink: Shrink[Any]) -> Shrink[tuple]:
        """Combine with another shrinker into a shrinker of pairs."""
        from .shrink.combine import zipped

        return zipped(self, other_shrink)

    def map(
        self, map_fn: Callable[[E], E1], unmap_fn: Callable[[E1], E]
    ) -> Shrink[E1]:
        """Convert into a shrinker of another type."""
        from .shrink.combine import mapped

        return mapped(self, map_fn, unmap_fn)

    def filter(self, predicate: Callable[[E], bool]) -> Shrink[E]:
        """Keep only the candidates accepted by the predicate."""
        from .shrink.combine import filtered

        return filtered(self, predicate)


class Gen(ABC, Generic[E]):
    """Produces example values to test a property with."""

    @abstractmethod
    def examples(self, seed: int) -> Iterator[E]:
        """Return an iterator of examples, given a randomization seed."""

    @abstractmethod
    def shrinker(self) -> Shrink[E]:
        """Return the shrinker bound to this generator, possibly an empty one."""

    def with_shrinker(self, other_shrink: Shrink[E]) -> Gen[E]:
        """Return the same generator bound to another shrinker."""
        return other_shrinker(self, other_shrink)

    def chain(self, other_gen: Gen[E]) -> Gen[E]:
        """Concatenate this generator with another one."""
        from .gen.combine import chained

        return chained(self, other_gen)

    def zip(self, other_gen: Gen[Any]) -> Gen[tuple]:
        """Combine with another generator into a generator of pairs."""
        from .gen.combine import zipped

        return zipped(self, other_gen)

    def zip_3(self, gen1: Gen[Any], gen2: Gen[Any]) -> Gen[tuple]:
        """Combine three generators into a generator of 3-tuples."""
        return self.zip(gen1).zip(gen2).map(
            lambda t: (*t[0], t[1]),
            lambda t: ((t[0], t[1]), t[2]),
        )

    def zip_4(self, gen1: Gen[Any], gen2: Gen[Any], gen3: Gen[Any]) -> Gen[tuple]:
        """Combine four generators into a generator of 4-tuples."""
        return self.zip(gen1).zip(gen2.zip(gen3)).map(
            lambda t: (*t[0], *t[1]),
            lambda t: ((t[0], t[1]), (t[2], t[3])),
        )

    def zip_5(
        self, gen1: Gen[Any], gen2: Gen[Any], gen3: Gen[Any], gen4: Gen[Any]
    ) -> Gen[tuple]:
        """Combine five generators into a generator of 5-tuples."""
        return self.zip(gen1).zip(gen2.zip_3(gen3, gen4)).map(
            lambda t: (*t[0], *t[1]),
            lambda t: ((t[0], t[1]), (t[2], t[3], t[4])),
        )

    def zip_6(
        self,
        gen1: Gen[Any],
        gen2: Gen[Any],
        gen3: Gen[Any],
        gen4: Gen[Any],
        gen5: Gen[Any],
    ) -> Gen[tuple]:
        """Combine six generators into a generator of 6-tuples."""
        return self.zip_3(gen1, gen2).zip(gen3.zip_3(gen4, gen5)).map(
            lambda t: (*t[0], *t[1]),
            lambda t: ((t[0], t[1], t[2]), (t[3], t[4], t[5])),
        )

    def map(
        self, map_fn: Callable[[E], E1], unmap_fn: Callable[[E1], E]
    ) -> Gen[E1]:
        """Convert into a generator of another type, keeping shrinking."""
        from .gen.combine import mapped

        return mapped(self, map_fn, unmap_fn)

    def filter(self, predicate: Callable[[E], bool]) -> Gen[E]:
        """Keep only the examples accepted by the predicate."""
        from .gen.combine import filtered

        return filtered(self, predicate)


class _FromFnShrink(Shrink[E]):
    def __init__(self, f: Callable[[E], Iterable[E]]) -> None:
        self._f = f

    def candidates(self, original: E) -> Iterator[E]:
        return iter(self._f(original))


_EMPTY_SHRINK: Shrink[Any] = _FromFnShrink(lambda _original: ())


class _FromFnGen(Gen[E]):
    def __init__(self, f: Callable[[int], Iterable[E]]) -> None:
        self._f = f

    def examples(self, seed: int) -> Iterator[E]:
        return iter(self._f(seed))

    def shrinker(self) -> Shrink[E]:
        return _EMPTY_SHRINK


class _OtherShrinkGen(Gen[E]):
    def __init__(self, generator: Gen[E], shrink: Shrink[E]) -> None:
        self._generator = generator
        self._shrink = shrink

    def examples(self, seed: int) -> Iterator[E]:
        return self._generator.examples(seed)

    def shrinker(self) -> Shrink[E]:
        return self._shrink


def gen_from_fn(f: Callable[[int], Iterable[E]]) -> Gen[E]:
    """Create a generator that calls ``f(seed)`` for each examples request.

    The resulting generator has no shrinker; bind one with
    :meth:`Gen.with_shrinker`.
    """
    return _FromFnGen(f)


def shrink_from_fn(f: Callable[[E], Iterable[E]]) -> Shrink[E]:
    """Create a shrinker that calls ``f(original)`` for each candidates request."""
    return _FromFnShrink(f)


def other_shrinker(gen: Gen[E], other_shrink: Shrink[E]) -> Gen[E]:
    """Create a generator with the same examples but another shrinker."""
    return _OtherShrinkGen(gen, other_shrink)