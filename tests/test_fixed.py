from itertools import islice

import pytest

from monkey_test.gen.fixed import constant, in_loop, sequence


def test_sequence_same_for_any_seed():
    gen = sequence([1, 20, 300])
    assert list(gen.examples(1337)) == [1, 20, 300]
    assert list(gen.examples(42)) == [1, 20, 300]


def test_sequence_empty():
    assert list(sequence([]).examples(1234)) == []


def test_sequence_has_no_shrinker():
    assert list(sequence([1, 2]).shrinker().candidates(2)) == []


def test_constant_repeats_forever():
    gen = constant("x")
    assert list(islice(gen.examples(3), 5)) == ["x"] * 5


def test_in_loop_cycles_examples():
    looper = in_loop([1, 20, 300])
    examples = list(islice(looper.examples(42), 10))
    assert examples == [1, 20, 300, 1, 20, 300, 1, 20, 300, 1]

    other_seed = list(islice(looper.examples(1337), 10))
    assert examples == other_seed


def test_in_loop_single_value():
    assert list(islice(in_loop([7]).examples(0), 3)) == [7, 7, 7]


def test_in_loop_rejects_empty():
    with pytest.raises(ValueError):
        in_loop([])