# monkey_test

A property based testing tool in the spirit of QuickCheck. You describe a
property that should hold for every example and give a generator of examples.
The tool then tries many of them. When an example breaks the property, the
tool shrinks it to a smaller example that still fails. The report then shows
something easy to reason about.

## Installing

```
pip install .
```

To run the package's own tests:

```
pip install ".[test]"
pytest
```

## A first property

```python
from monkey_test.config import monkey_test
from monkey_test.gen.fixed import sequence
from monkey_test.shrink.integers import int_in_range

result = (
    monkey_test()
    .with_seed(123456)
    .with_generator(sequence([1, 2, 3, 10, 20, 30]))
    .with_shrinker(int_in_range(0, 255))
    .with_title("Less than thirteen")
    .test_true(lambda x: x < 13)
)

result.assert_minimum_failure(13)
```

`test_true` returns a result and does not raise:

- `MonkeyOk` when every example passed.
- `MonkeyErr` when an example failed. It holds:
  - `minimum_failure`
  - `original_failure`
  - `some_other_failures`, other failures seen while shrinking
  - `success_count`, the number of examples that passed before the failure
  - `shrink_count`
  - `seed`
  - `title`
  - `reason`

Both have `assert_minimum_failure(expected)`. It raises `MonkeyTestFailure`
unless the property failed with exactly that minimum failure.

An exception raised by the property counts as a failure of the property. Its
type, its message and where it was raised end up in `reason`.

The `assert_*` methods raise `MonkeyTestFailure` on failure. This is a
subclass of `AssertionError`, so test runners report it like any failed
assertion. The message names the minimum failure, the reason, the seed needed
to reproduce the run, the success count and the other failures. The methods
are:

- `assert_true(prop)`: the property returns true for every example.
- `assert_no_panic(prop)`: calling the property never raises.
- `assert_eq(expected, actual)`: two values derived from each example are
  equal.
- `assert_ne(expected, actual)`: two values derived from each example are not
  equal.

Each assert returns the same configured object, so several can be chained on
one generator.

`evaluate_property(conf_and_gen, check)` is the lower-level runner. It is
given a check that returns `None` on success or a failure reason string. It
raises `ValueError` if the generator runs out before the configured number of
examples has been tried.

## Configuration

- `monkey_test()` returns a `Conf` with 100 examples and a 64-bit seed from
  `seed_to_use()`.
- `with_example_count(n)` and `with_seed(seed)` change those two settings.
- `with_generator(gen)` fixes the generator and returns a `ConfAndGen`.
  `with_shrinker` and `with_title` can still be set on it.

Reusing a seed reproduces a run exactly.

## Generators

All generators are `Gen` objects. `examples(seed)` returns an iterator of
examples for a seed. `shrinker()` returns the shrinker that goes with the
generator.

- `monkey_test.gen.fixed`: `sequence`, `constant` and `in_loop`, for
  deterministic examples.
- `monkey_test.gen.integers`: `any`, `ranged` and `completely_random`, plus
  `seeds`.
  - Each takes an `IntType` (`I8` … `I128`, `U8` … `U128`, `ISIZE`, `USIZE`),
    and `ranged` and `completely_random` also take optional inclusive `low`
    and `high` bounds.
  - `ranged` gives extra weight to the range's ends and to zero.
- `monkey_test.gen.floats`: `any`, `number`, `positive`, `negative`,
  `finite`, `zero_to_one`, `ranged` and `completely_random`.
  - Each takes a `FloatType` (`F32` or `F64`, default `F64`).
  - The ranged ones raise `ValueError` for non-finite bounds.
  - All but `completely_random` give extra weight to special values: ±0, ±1,
    the range ends, infinities and NaN.
- `monkey_test.gen.booleans`: `any` and `with_ratio`.
- `monkey_test.gen.pick`:
  - `pick_evenly` and `pick_with_ratio` choose among values.
  - `mix_evenly` and `mix_with_ratio` mix generators.
  - Ratios are integers from 0 to 255.
- `monkey_test.gen.sized`: `default`, `progressively_increasing` and
  `max_iterator`, for collection sizes that grow as examples go on.
- `monkey_test.gen.vectors`: `any(element_gen)`, for lists of elements.

Generators compose, and composition keeps shrinking working:

```python
from monkey_test.config import monkey_test
from monkey_test.gen.pick import pick_evenly

evens = pick_evenly([0, 2, 4, 6, 8])
odds = pick_evenly([1, 3, 5, 7, 9])

pairs = evens.zip(odds)
sums = pairs.map(lambda pair: pair[0] + pair[1], lambda total: (0, total))

monkey_test().with_generator(sums).assert_true(lambda n: n % 2 == 1)
```

- `zip` through `zip_6` build tuples.
- `map` takes a mapping and its inverse, so the original shrinker can be
  reused.
- `filter` keeps the examples that match a predicate. It raises
  `TooHeavyFilteringError` (from `monkey_test.shrink.combine`) when 100
  examples in a row are rejected.
- `chain` appends one generator after another.

The same combinators exist as functions in `monkey_test.gen.combine`:
`chained`, `mapped`, `zipped` and `filtered`.

## Shrinkers

A `Shrink` turns a failing example into smaller candidates with
`candidates(original)`. Shrinkers have `zip`, `map` and `filter` as well.

- `monkey_test.shrink.basic`: `none`, `bool_to_false`, `bool_to_true` and
  `fixed_sequence`.
- `monkey_test.shrink.integers`: `int_to_zero(int_type)` and
  `int_in_range(min_value, max_value)`. Both shrink towards zero, or towards
  the value closest to zero inside the range.
- `monkey_test.shrink.floats`: `to_zero(float_type)`, which shrinks towards
  `+0.0`.
- `monkey_test.shrink.vectors`:
  - `default(element_shrinker)` removes ever smaller slices first and then
    shrinks single elements.
  - `no_element_shrinking()` only removes slices.
- `monkey_test.shrink.combine`: `filtered`, `mapped` and `zipped`.

Custom generators and shrinkers can be built from a function with
`gen_from_fn` and `shrink_from_fn` in `monkey_test.core`. A generator can be
given another shrinker with `other_shrinker` or `Gen.with_shrinker`.

## What it does not do

The package is a library only. It has no command line tool, no pytest plugin
or decorator, and it does not store failing examples between runs. To replay a
failure, pass the reported seed to `with_seed`.