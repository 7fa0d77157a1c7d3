"""Matching engine for collection checks.

Every membership check is built on one primitive, greedy first-seen
consumption (:func:`consume_greedily`): matchers are processed in the order
given, and each consumes the lowest-indexed element it accepts that no
earlier matcher consumed.

This is not a maximum bipartite matching. Matchers with overlapping
conditions can give confusing results. Given::

    actual = ["a", "ab", "abc"]
    matchers = [contains("a"), contains("b"), equals_wrapper("a")]

the first two matchers consume ``"a"`` and ``"ab"``, leaving only ``"abc"``
for ``<equals 'a'>``, so the check fails even though a different assignment
would have succeeded.

Checks never raise on failure. They report a diagnostic through the
``ExpectMeta`` they are given and return a result object.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from fluentcheck.diagnostics.formatting import (
    CollectionFormatters,
    format_actual_collection,
    format_problem_expected_exactly,
    format_problem_forbidden_values,
    format_problem_unexpected_values,
)
from fluentcheck.diagnostics.meta import ExpectMeta
from fluentcheck.diagnostics.models import PASSED, CheckResult
from fluentcheck.matching.base import Matcher, ensure_matchers, equals_wrapper
from fluentcheck.matching.ordered import OrderingResult
from fluentcheck.matching.outcomes import MatchAssignment, MatchOutcome
from fluentcheck.types import ProblemKind

logger = logging.getLogger(__name__)


def to_list(value: Any) -> list[Any]:
    """Convert ``value`` to a list, keeping its iteration order.

    Strings and bytes are a single value, mappings contribute their keys and
    non-iterables are wrapped.
    """
    if isinstance(value, (str, bytes)):
        return [value]
    if isinstance(value, Mapping):
        return list(value.keys())
    if isinstance(value, Iterable):
        return list(value)
    return [value]


def consume_greedily(
    actual: Sequence[Any],
    matchers: Sequence[Matcher],
    *,
    exact: bool,
) -> MatchOutcome:
    """Assign each matcher to the first unconsumed element it accepts."""
    consumed = [False] * len(actual)
    pairs: list[tuple[int, int]] = []
    missing: list[int] = []

    for matcher_index, matcher in enumerate(matchers):
        for actual_index, value in enumerate(actual):
            if consumed[actual_index]:
                continue
            if matcher(value):
                consumed[actual_index] = True
                pairs.append((matcher_index, actual_index))
                break
        else:
            missing.append(matcher_index)

    unconsumed = tuple(i for i, used in enumerate(consumed) if not used)
    logger.debug(
        "Greedy match of %d matchers over %d values: pairs=%s missing=%s unconsumed=%s",
        len(matchers),
        len(actual),
        pairs,
        missing,
        unconsumed,
    )
    return MatchOutcome(
        assignment=MatchAssignment(pairs=tuple(pairs)),
        missing=tuple(missing),
        unconsumed=unconsumed,
        exact=exact,
    )


def check_contains_exactly(
    actual_container: Iterable[Any],
    expect_contains: Iterable[Any],
    *,
    meta: ExpectMeta,
    formatters: CollectionFormatters | None = None,
) -> OrderingResult:
    """Check the container holds exactly ``expect_contains``, respecting multiplicity.

    Literal values are compared with ``==``. Missing entries are reported as
    the values themselves.
    """
    expected = to_list(expect_contains)
    matchers = [equals_wrapper(value) for value in expected]
    return _check_exactly(
        actual_container,
        matchers,
        missing_as=expected,
        expected_display=[repr(value) for value in expected],
        meta=meta,
        formatters=formatters,
        default_expected=expected,
    )


def check_contains_exactly_predicates(
    actual_container: Iterable[Any],
    expect_contains: Iterable[Matcher],
    *,
    meta: ExpectMeta,
    formatters: CollectionFormatters | None = None,
) -> OrderingResult:
    """Check a 1:1 correspondence between container values and matchers.

    * Multiplicity is respected: a matcher given twice must match two
      distinct elements.
    * Matching is greedy in first-seen order (see module docstring).
    * The order of matches is only checked by calling ``in_order()`` on the
      returned :class:`OrderingResult`.
    """
    matchers = ensure_matchers(to_list(expect_contains))
    return _check_exactly(
        actual_container,
        matchers,
        missing_as=matchers,
        expected_display=[m.description for m in matchers],
        meta=meta,
        formatters=formatters,
        default_expected=matchers,
    )


def _check_exactly(
    actual_container: Iterable[Any],
    matchers: list[Matcher],
    *,
    missing_as: Sequence[Any],
    expected_display: Sequence[str],
    meta: ExpectMeta,
    formatters: CollectionFormatters | None,
    default_expected: Sequence[Any],
) -> OrderingResult:
    actual = to_list(actual_container)
    if formatters is None:
        formatters = CollectionFormatters(
            format_actual=lambda: format_actual_collection(actual, sort=False),
            sort=False,
            format_expected=lambda: format_problem_expected_exactly(default_expected, sort=False),
        )

    outcome = consume_greedily(actual, matchers, exact=True)
    result = PASSED
    if not outcome.passed:
        missing = [missing_as[i] for i in outcome.missing]
        unexpected = [actual[i] for i in outcome.unexpected]
        problems = []
        if formatters.format_expected is not None:
            problems.append(formatters.format_expected())
        if missing:
            problems.append(formatters.format_missing(missing))
        if unexpected:
            problems.append(formatters.format_unexpected(unexpected))
        kind = ProblemKind.MISSING_REQUIRED if missing else ProblemKind.UNEXPECTED_PRESENT
        diagnostic = meta.report(
            kind,
            "\n".join(problems),
            actual_text=formatters.format_actual(),
            actual=actual,
            sort=formatters.sort,
            expected=tuple(expected_display),
            missing=tuple(_plain(m) for m in missing),
            unexpected=tuple(unexpected),
        )
        result = CheckResult(passed=False, kind=kind, diagnostic=diagnostic)

    return OrderingResult(
        outcome=outcome,
        result=result,
        expected=expected_display,
        actual=actual,
        meta=meta,
        format_actual=formatters.format_actual,
        sort=formatters.sort,
        format_out_of_order=formatters.format_out_of_order,
    )


def check_contains_at_least_predicates(
    actual_container: Iterable[Any],
    matchers: Iterable[Matcher],
    *,
    meta: ExpectMeta,
    formatters: CollectionFormatters | None = None,
) -> OrderingResult:
    """Check every matcher consumes a distinct element; extra elements are allowed."""
    actual = to_list(actual_container)
    matchers = ensure_matchers(to_list(matchers))
    if formatters is None:
        formatters = CollectionFormatters(
            format_actual=lambda: format_actual_collection(actual),
        )

    outcome = consume_greedily(actual, matchers, exact=False)
    expected_display = [m.description for m in matchers]
    result = PASSED
    if not outcome.passed:
        missing = [matchers[i] for i in outcome.missing]
        diagnostic = meta.report(
            ProblemKind.MISSING_REQUIRED,
            formatters.format_missing(missing),
            actual_text=formatters.format_actual(),
            actual=actual,
            sort=formatters.sort,
            expected=tuple(expected_display),
            missing=tuple(m.description for m in missing),
        )
        result = CheckResult(
            passed=False, kind=ProblemKind.MISSING_REQUIRED, diagnostic=diagnostic
        )

    return OrderingResult(
        outcome=outcome,
        result=result,
        expected=expected_display,
        actual=actual,
        meta=meta,
        format_actual=formatters.format_actual,
        sort=formatters.sort,
        format_out_of_order=formatters.format_out_of_order,
    )


def check_contains_none_of(
    collection: Iterable[Any],
    none_of: Iterable[Any],
    *,
    meta: ExpectMeta,
    sort: bool = True,
) -> CheckResult:
    """Check that no value of ``none_of`` is present in ``collection``."""
    actual = to_list(collection)
    forbidden = to_list(none_of)
    found = [value for value in forbidden if any(element == value for element in actual)]
    if not found:
        return PASSED

    diagnostic = meta.report(
        ProblemKind.FORBIDDEN_PRESENT,
        format_problem_forbidden_values(forbidden, sort=sort)
        + "\nbut found:\n"
        + format_problem_unexpected_values(found, sort=sort),
        actual_text=format_actual_collection(actual, sort=sort),
        actual=actual,
        sort=sort,
        expected=tuple(repr(value) for value in forbidden),
        unexpected=tuple(found),
    )
    return CheckResult(passed=False, kind=ProblemKind.FORBIDDEN_PRESENT, diagnostic=diagnostic)


def check_contains_predicate(
    collection: Iterable[Any],
    matcher: Matcher,
    *,
    meta: ExpectMeta,
    format_problem: str | None = None,
    format_actual: Callable[[], str] | None = None,
    sort: bool = True,
) -> CheckResult:
    """Check that at least one element satisfies ``matcher``.

    ``sort`` must describe how ``format_actual`` renders the values.
    """
    ensure_matchers([matcher])
    actual = to_list(collection)
    if any(matcher(value) for value in actual):
        return PASSED

    diagnostic = meta.report(
        ProblemKind.NO_MATCH_FOUND,
        format_problem or f"expected to contain: {matcher.description}",
        actual_text=(
            format_actual() if format_actual else format_actual_collection(actual, sort=sort)
        ),
        actual=actual,
        sort=sort,
        expected=(matcher.description,),
        missing=(matcher.description,),
    )
    return CheckResult(passed=False, kind=ProblemKind.NO_MATCH_FOUND, diagnostic=diagnostic)


def check_not_contains_predicate(
    collection: Iterable[Any],
    matcher: Matcher,
    *,
    meta: ExpectMeta,
    sort: bool = True,
) -> CheckResult:
    """Check that no element satisfies ``matcher``; every match is reported."""
    ensure_matchers([matcher])
    actual = to_list(collection)
    matches = [value for value in actual if matcher(value)]
    if not matches:
        return PASSED

    diagnostic = meta.report(
        ProblemKind.UNWANTED_MATCH_FOUND,
        f"expected not to contain values matching: {matcher.description}\n"
        + format_problem_unexpected_values(matches, sort=sort),
        actual_text=format_actual_collection(actual, sort=sort),
        actual=actual,
        sort=sort,
        expected=(matcher.description,),
        unexpected=tuple(matches),
    )
    return CheckResult(
        passed=False, kind=ProblemKind.UNWANTED_MATCH_FOUND, diagnostic=diagnostic
    )


def _plain(value: Any) -> Any:
    return value.description if isinstance(value, Matcher) else value
