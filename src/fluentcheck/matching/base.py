"""Matcher type and the built-in matcher constructors.

A :class:`Matcher` is a named boolean predicate over a single value. The
matching engine calls ``test`` any number of times and in any order, so
predicates must be pure functions of their argument.
"""

from __future__ import annotations

import fnmatch
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Matcher:
    """Named predicate over one value.

    Attributes
    ----------
    description
        Human-readable description used in failure diagnostics.
    test
        Pure function returning True when the value is accepted.
    """

    description: str
    test: Callable[[Any], bool]

    def __call__(self, value: Any) -> bool:
        return bool(self.test(value))

    def __str__(self) -> str:
        return self.description


def matcher(description: str) -> Callable[[Callable[[Any], bool]], Matcher]:
    """Turn a predicate function into a :class:`Matcher`.

    Usage::

        @matcher("<is even>")
        def is_even(value):
            return value % 2 == 0
    """

    def decorator(fn: Callable[[Any], bool]) -> Matcher:
        return Matcher(description=description, test=fn)

    return decorator


def custom(description: str, test: Callable[[Any], bool]) -> Matcher:
    """Wrap an arbitrary predicate with a description."""
    return Matcher(description=description, test=test)


def equals_wrapper(value: Any) -> Matcher:
    """Match values equal to ``value``."""
    return Matcher(
        description=f"<equals {value!r}>",
        test=lambda other: other == value,
    )


def contains(substring: str) -> Matcher:
    """Match strings containing ``substring``."""
    return Matcher(
        description=f"<contains {substring!r}>",
        test=lambda other: substring in other,
    )


def str_startswith(prefix: str) -> Matcher:
    return Matcher(
        description=f"<starts with {prefix!r}>",
        test=lambda other: other.startswith(prefix),
    )


def str_endswith(suffix: str) -> Matcher:
    return Matcher(
        description=f"<ends with {suffix!r}>",
        test=lambda other: other.endswith(suffix),
    )


def str_matches(pattern: str) -> Matcher:
    """Match strings against a glob pattern (``*``, ``?`` and ``[...]``)."""
    return Matcher(
        description=f"<matches {pattern!r}>",
        test=lambda other: fnmatch.fnmatchcase(other, pattern),
    )


def is_in(values: Iterable[Any]) -> Matcher:
    """Match values that are members of ``values``."""
    values = tuple(values)
    return Matcher(
        description=f"<is any of {list(values)!r}>",
        test=lambda other: other in values,
    )


def never(description: str) -> Matcher:
    """Matcher that accepts nothing."""
    return Matcher(description=description, test=lambda other: False)


def ensure_matchers(items: list[Any]) -> list[Matcher]:
    """Validate that every item is a :class:`Matcher`."""
    for index, item in enumerate(items):
        if not isinstance(item, Matcher):
            msg = f"Expected a Matcher at index {index}, got {type(item).__name__}: {item!r}"
            raise TypeError(msg)
    return items
