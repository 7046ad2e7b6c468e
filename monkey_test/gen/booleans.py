"""Generators of boolean values."""

from __future__ import annotations

from ..core import Gen
from ..shrink.basic import bool_to_false
from .pick import pick_with_ratio


def with_ratio(ratio_false: int, ratio_true: int) -> Gen[bool]:
    """Booleans with frequencies given by the ratios, shrinking to ``False``."""
    return pick_with_ratio([(ratio_false, False), (ratio_true, True)]).with_shrinker(
        bool_to_false()
    )


def any() -> Gen[bool]:  # noqa: A001
    """Uniformly distributed ``True`` and ``False``."""
    return with_ratio(1, 1)