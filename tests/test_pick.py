import itertools
from collections import Counter

import pytest

from monkey_test.gen.fixed import sequence
from monkey_test.gen.integers import any as any_int
from monkey_test.gen.pick import (
    SampleTarget,
    mix_evenly,
    mix_with_ratio,
    pick_evenly,
    pick_with_ratio,
)
from monkey_test.shrink.basic import none
from monkey_test.shrink.integers import IntType, int_to_zero


def _assert_distribution(gen, expected, tolerance, count=100_000):
    actual = Counter(itertools.islice(gen.examples(1234), count))
    assert set(actual) == set(expected)
    actual_total = sum(actual.values())
    expected_total = sum(expected.values())
    for key, expected_count in expected.items():
        actual_percent = actual[key] * 100 / actual_total
        expected_percent = expected_count * 100 / expected_total
        assert abs(actual_percent - expected_percent) <= tolerance, key


def test_sample_target_maps_samples_by_ratio():
    target = SampleTarget([(3, "head"), (1, "tail")])
    assert target.sample_domain_max() == 4
    assert [target.target_from_sample(s) for s in range(1, 5)] == [
        "head",
        "head",
        "head",
        "tail",
    ]


def test_sample_target_skips_zero_ratios_and_maps():
    target = SampleTarget([(2, 1), (0, 2), (1, 3)]).map(lambda t: t * 10)
    assert target.sample_domain_max() == 3
    assert [target.target_from_sample(s) for s in (1, 2, 3)] == [10, 10, 30]


def test_sample_target_rejects_sample_outside_domain():
    target = SampleTarget.evenly(["a", "b"])
    with pytest.raises(ValueError):
        target.target_from_sample(3)


def test_pick_with_ratio_panics_on_missing_options():
    with pytest.raises(
        ValueError,
        match=r"Given argument \[\] has no target value with non-zero ratio\.",
    ):
        pick_with_ratio([])


def test_pick_with_ratio_panics_on_zero_ratio():
    with pytest.raises(
        ValueError,
        match=r"Given argument \[\(0, 'x'\)\] has no target value with "
        r"non-zero ratio\.",
    ):
        pick_with_ratio([(0, "x")])


def test_pick_with_ratio_rejects_too_large_ratio():
    with pytest.raises(ValueError):
        pick_with_ratio([(256, "x")])


def test_pick_with_ratio_handles_single_option():
    _assert_distribution(pick_with_ratio([(255, "x")]), {"x": 1}, 1.0)


def test_pick_with_ratio_follow_given_ratios():
    _assert_distribution(
        pick_with_ratio([(50, "b"), (25, "c"), (25, "a")]),
        {"a": 1, "b": 2, "c": 1},
        1.0,
    )


def test_pick_evenly_is_evenly_distributed():
    _assert_distribution(
        pick_evenly(["b", "c", "a"]), {"a": 1, "b": 1, "c": 1}, 1.0
    )


def test_pick_has_no_shrinker():
    assert list(pick_evenly([1, 2]).shrinker().candidates(2)) == []


def test_all_values_from_generator_are_returned():
    mixer = mix_with_ratio([(42, sequence([1, 2, 3, 4, 5, 6]))])
    assert list(mixer.examples(1337)) == [1, 2, 3, 4, 5, 6]


def test_mixer_be_used_more_than_once():
    mixer = mix_with_ratio([(42, sequence(["a", "b", "c"]))])
    assert list(mixer.examples(1337)) == ["a", "b", "c"]
    assert list(mixer.examples(1337)) == ["a", "b", "c"]
    assert next(mixer.examples(1337)) == "a"
    assert next(mixer.examples(1337)) == "a"


def test_values_are_distributed_according_to_ratio():
    mixer = mix_with_ratio(
        [
            (64, pick_evenly(["A", "B"])),
            (32, pick_evenly(["1", "2", "3", "4"])),
        ]
    )
    _assert_distribution(
        mixer,
        {"A": 4, "B": 4, "1": 1, "2": 1, "3": 1, "4": 1},
        1.0,
    )


def test_mix_evenly_has_uniform_distribution():
    mixer = mix_evenly(
        [pick_evenly(["A", "B"]), pick_evenly(["1", "2", "3", "4"])]
    )
    _assert_distribution(
        mixer,
        {"A": 2, "B": 2, "1": 1, "2": 1, "3": 1, "4": 1},
        1.0,
    )


def test_mix_should_reuse_shrinker_from_first_generator():
    with_shrinker = mix_evenly(
        [
            any_int(IntType.U8).with_shrinker(int_to_zero(IntType.U8)),
            any_int(IntType.U8).with_shrinker(none()),
        ]
    )
    without_shrinker = mix_evenly(
        [
            any_int(IntType.U8).with_shrinker(none()),
            any_int(IntType.U8).with_shrinker(int_to_zero(IntType.U8)),
        ]
    )

    candidate = next(with_shrinker.shrinker().candidates(10), None)
    assert candidate is not None
    assert candidate != 10
    assert list(without_shrinker.shrinker().candidates(10)) == []


def test_mix_evenly_rejects_no_generators():
    with pytest.raises(ValueError):
        mix_evenly([])