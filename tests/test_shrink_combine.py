import itertools

import pytest

from monkey_test.shrink.basic import fixed_sequence, none
from monkey_test.shrink.combine import (
    TooHeavyFilteringError,
    filtered,
    mapped,
    zipped,
)
from monkey_test.shrink.integers import IntType, int_to_zero


def assert_has_at_least_these_candidates(shrinker, original, expected):
    left_to_expect = list(expected)
    for candidate in itertools.islice(shrinker.candidates(original), 1000):
        if candidate in left_to_expect:
            left_to_expect.remove(candidate)
    assert left_to_expect == []


def test_filter_keeps_candidates_matching_predicate():
    shrinker = filtered(
        fixed_sequence([11, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1]),
        lambda e: e % 2 == 0,
    )
    assert list(shrinker.candidates(1337)) == [10, 8, 6, 4, 2]


def test_filter_method_on_shrink():
    shrinker = fixed_sequence([1, 2, 3, 4]).filter(lambda e: e > 2)
    assert list(shrinker.candidates(0)) == [3, 4]


def test_filter_raises_on_too_heavy_filtering():
    shrinker = int_to_zero(IntType.U8).filter(lambda e: e == 234)
    with pytest.raises(
        TooHeavyFilteringError,
        match=r"Too heavy filtering\. Filtered out 100 examples in a row\.",
    ):
        next(shrinker.candidates(200))


def test_filter_does_not_raise_on_repeated_interleaved_filtering():
    shrinker = int_to_zero(IntType.U16).filter(lambda e: e % 2 == 0)
    assert sum(1 for _ in shrinker.candidates(2000)) > 1000


def test_map_gives_no_candidates_without_inner_shrinking():
    shrink = mapped(none(), str, int)
    assert list(itertools.islice(shrink.candidates("100"), 1000)) == []


def test_map_returns_some_other_stringified_numbers():
    shrink = mapped(int_to_zero(IntType.I64), str, int)
    assert_has_at_least_these_candidates(
        shrink, "100", ["99", "98", "50", "1", "0"]
    )


def test_map_method_on_shrink():
    shrink = fixed_sequence([1, 2]).map(lambda i: i * 10, lambda i: i // 10)
    assert list(shrink.candidates(70)) == [10, 20]


def test_zip_gives_no_candidates_without_inner_shrinking():
    shrink = zipped(none(), none())
    assert list(itertools.islice(shrink.candidates((100, "x")), 1000)) == []


def test_zip_returns_permutations_of_inner_candidates():
    shrink = zipped(int_to_zero(IntType.U8), int_to_zero(IntType.U8))
    assert_has_at_least_these_candidates(
        shrink,
        (4, 4),
        [
            (4, 3), (4, 2), (4, 1), (4, 0),
            (3, 4), (2, 4), (1, 4), (0, 4),
            (3, 3), (2, 2), (1, 1), (0, 0),
        ],
    )


def test_zip_orders_left_then_right_then_both():
    shrink = fixed_sequence([1, 2]).zip(fixed_sequence(["a"]))
    assert list(shrink.candidates((9, "z"))) == [
        (1, "z"),
        (2, "z"),
        (9, "a"),
        (1, "a"),
    ]