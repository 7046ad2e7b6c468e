"""Configuring and running property based tests."""

from __future__ import annotations

import dataclasses
import itertools
import secrets
import traceback
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from .core import Gen, Shrink

E = TypeVar("E")

Check = Callable[[Any], Union[str, None]]

_SHRINK_EFFORT = 10_000
_MAX_OTHER_FAILURES = 100


class MonkeyTestFailure(AssertionError):
    """Raised when a property asserted to hold fails for some example."""


def seed_to_use() -> int:
    """Fresh random seed taken from the operating system's entropy source."""
    return secrets.randbits(64)


@dataclass(frozen=True)
class MonkeyOk:
    """A successful property test result."""

    def assert_minimum_failure(self, expected_minimum_failure: Any) -> MonkeyOk:
        """Always raises MonkeyTestFailure, since the property never failed."""
        raise MonkeyTestFailure(
            "Expecting property to fail for some example, but it never failed."
        )


@dataclass(frozen=True)
class MonkeyErr(Generic[E]):
    """A failed property test result."""

    minimum_failure: E
    original_failure: E
    some_other_failures: list[E]
    success_count: int
    shrink_count: int
    seed: int
    title: str | None
    reason: str

    def assert_minimum_failure(self, expected_minimum_failure: E) -> MonkeyErr[E]:
        """Return self if the minimum failure equals the expected one.

        Raises MonkeyTestFailure otherwise.
        """
        if expected_minimum_failure != self.minimum_failure:
            raise MonkeyTestFailure(
                "Expecting property to fail, which it did, but also expecting "
                f"minimum failure to be equal to {expected_minimum_failure!r}, "
                f"but got {self.minimum_failure!r}"
            )
        return self


MonkeyResult = Union[MonkeyOk, MonkeyErr]


@dataclass(frozen=True)
class Conf:
    """Configuration for running monkey tests."""

    example_count: int = 100
    seed: int = field(default_factory=seed_to_use)

    def with_generator(self, gen: Gen[E]) -> ConfAndGen[E]:
        """Use the given generator for the examples."""
        return ConfAndGen(self, gen)

    def with_example_count(self, example_count: int) -> Conf:
        """Use the given number of examples."""
        return dataclasses.replace(self, example_count=example_count)

    def with_seed(self, seed: int) -> Conf:
        """Use the given seed, for instance to reproduce a failing run."""
        return dataclasses.replace(self, seed=seed)


def monkey_test() -> Conf:
    """Start configuring a property based test with default settings."""
    return Conf()


@dataclass(frozen=True)
class ConfAndGen(Generic[E]):
    """Configuration together with the generator of the examples."""

    conf: Conf
    gen: Gen[E]
    title: str | None = None

    def test_true(self, prop: Callable[[E], bool]) -> MonkeyResult:
        """Check that the property is true for every example.

        An exception raised by the property counts as a failure.
        """

        def check(example: E) -> str | None:
            if prop(example):
                return None
            return "Expecting 'true' but got 'false'."

        return evaluate_property(self, _catch_exceptions(check))

    def assert_true(self, prop: Callable[[E], bool]) -> ConfAndGen[E]:
        """Raise MonkeyTestFailure unless the property is true for every example."""
        _raise_on_err(self.test_true(prop))
        return self

    def assert_no_panic(self, prop: Callable[[E], Any]) -> ConfAndGen[E]:
        """Raise MonkeyTestFailure if the property raises for some example."""

        def check(example: E) -> str | None:
            prop(example)
            return None

        _raise_on_err(evaluate_property(self, _catch_exceptions(check)))
        return self

    def assert_eq(
        self, expected: Callable[[E], Any], actual: Callable[[E], Any]
    ) -> ConfAndGen[E]:
        """Raise MonkeyTestFailure unless both derived values are equal."""

        def check(example: E) -> str | None:
            a = actual(example)
            e = expected(example)
            if a == e:
                return None
            return f"Actual value should equal expected {e!r}, but got {a!r}."

        _raise_on_err(evaluate_property(self, _catch_exceptions(check)))
        return self

    def assert_ne(
        self, expected: Callable[[E], Any], actual: Callable[[E], Any]
    ) -> ConfAndGen[E]:
        """Raise MonkeyTestFailure if both derived values are equal."""

        def check(example: E) -> str | None:
            a = actual(example)
            e = expected(example)
            if a != e:
                return None
            return f"Actual value should not equal expected {e!r}, but got {a!r}."

        _raise_on_err(evaluate_property(self, _catch_exceptions(check)))
        return self

    def with_shrinker(self, shrink: Shrink[E]) -> ConfAndGen[E]:
        """Use another shrinker for failing examples."""
        return dataclasses.replace(self, gen=self.gen.with_shrinker(shrink))

    def with_title(self, title: str) -> ConfAndGen[E]:
        """Name the properties checked from here on."""
        return dataclasses.replace(self, title=title)


def _catch_exceptions(check: Check) -> Check:
    """Treat an exception raised by a check as a failure of the property."""

    def caught(example: Any) -> str | None:
        try:
            return check(example)
        except Exception as exc:  # noqa: BLE001 - any error disproves the property
            frames = traceback.extract_tb(exc.__traceback__)
            if frames:
                location = f"in file '{frames[-1].filename}' at line {frames[-1].lineno}"
            else:
                location = "at unknown location"
            message = f"{type(exc).__name__}: {exc}" if str(exc) else type(exc).__name__
            return f'Expecting no panic, but got panic "{message}" {location}.'

    return caught


def _failure_message(err: MonkeyErr[Any]) -> str:
    if err.title is not None:
        first_line = f'Monkey test property "{err.title}" failed!'
    else:
        first_line = "Monkey test property failed!"
    others = "".join(f"\n\t{failure!r}" for failure in err.some_other_failures)
    return (
        f"{first_line}\n"
        f"Failure: {err.minimum_failure!r}\n"
        f"Reason: {err.reason}\n"
        "\n"
        f"Reproduction seed: {err.seed}\n"
        f"Success count before failure: {err.success_count}\n"
        f"Other failures:\n\t{err.original_failure!r}{others}\n"
    )


def _raise_on_err(result: MonkeyResult) -> None:
    if isinstance(result, MonkeyErr):
        raise MonkeyTestFailure(_failure_message(result))


def _shrink(
    prop: Check, original_failure: Any, shrinker: Shrink[Any]
) -> list[tuple[Any, str]]:
    shrunk: list[tuple[Any, str]] = []
    candidates = shrinker.candidates(original_failure)
    for _ in range(_SHRINK_EFFORT):
        candidate = next(candidates, _NO_CANDIDATE)
        if candidate is _NO_CANDIDATE:
            break
        reason = prop(candidate)
        if reason is not None:
            shrunk.append((candidate, reason))
            candidates = shrinker.candidates(candidate)
    return shrunk


_NO_CANDIDATE = object()


def evaluate_property(conf_and_gen: ConfAndGen[E], prop: Check) -> MonkeyResult:
    """Run the check on the configured examples, shrinking the first failure.

    The check returns None on success or the reason of a failure. Raises
    ValueError if the generator runs out before enough examples are tried.
    """
    conf = conf_and_gen.conf
    examples = conf_and_gen.gen.examples(conf.seed)
    tried = 0
    for example in itertools.islice(examples, conf.example_count):
        first_reason = prop(example)
        if first_reason is not None:
            shrunk = _shrink(prop, example, conf_and_gen.gen.shrinker())
            other_count = min(max(len(shrunk), 1), _MAX_OTHER_FAILURES) - 1
            minimum_failure, reason = shrunk[-1] if shrunk else (example, first_reason)
            return MonkeyErr(
                minimum_failure=minimum_failure,
                original_failure=example,
                some_other_failures=[value for value, _ in shrunk[:other_count]],
                success_count=tried,
                shrink_count=len(shrunk),
                seed=conf.seed,
                title=conf_and_gen.title,
                reason=reason,
            )
        tried += 1
    if tried < conf.example_count:
        raise ValueError(f"Too few examples. Only got {tried}")
    return MonkeyOk()