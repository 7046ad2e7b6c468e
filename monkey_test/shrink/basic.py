"""Elementary shrinkers: empty, boolean and fixed sequences."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from ..core import Shrink, shrink_from_fn

E = TypeVar("E")


def none() -> Shrink[Any]:
    """Shrinker that never produces any smaller example."""
    return shrink_from_fn(lambda _original: ())


def _bool_to(shrink_to_true: bool) -> Shrink[bool]:
    def candidates(original: bool) -> tuple[bool, ...]:
        if original != shrink_to_true:
            return (not original,)
        return ()

    return shrink_from_fn(candidates)


def bool_to_false() -> Shrink[bool]:
    """Boolean shrinker regarding ``False`` as smaller than ``True``."""
    return _bool_to(False)


def bool_to_true() -> Shrink[bool]:
    """Boolean shrinker regarding ``True`` as smaller than ``False``."""
    return _bool_to(True)


def fixed_sequence(candidates: Iterable[E]) -> Shrink[E]:
    """Shrinker always giving the same fixed candidates, whatever the original."""
    data = tuple(candidates)
    return shrink_from_fn(lambda _original: data)