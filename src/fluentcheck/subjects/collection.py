"""CollectionSubject: assertions over an ordered collection of values."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import Any

from fluentcheck.config import get_settings
from fluentcheck.diagnostics.formatting import (
    CollectionFormatters,
    format_actual_collection,
    format_problem_expected_exactly,
    format_problem_missing_required_values,
    format_problem_predicates_did_not_match,
    format_problem_unexpected_values,
)
from fluentcheck.diagnostics.meta import ExpectMeta
from fluentcheck.diagnostics.models import CheckResult
from fluentcheck.matching.base import Matcher, equals_wrapper
from fluentcheck.matching.engine import (
    check_contains_at_least_predicates,
    check_contains_exactly,
    check_contains_exactly_predicates,
    check_contains_none_of,
    check_contains_predicate,
    check_not_contains_predicate,
    to_list,
)
from fluentcheck.matching.ordered import OrderingResult
from fluentcheck.subjects.int_subject import IntSubject
from fluentcheck.types import ProblemKind


class CollectionSubject:
    """Binds an actual collection to display settings and the matching engine.

    Parameters
    ----------
    values : Iterable
        The collection under test. It is read, never modified.
    meta : ExpectMeta
        Call-chain metadata for failure context.
    container_name : str
        Conceptual name of the container, used in failure text.
    sortable : bool | None
        Whether failure output may be sorted for display. ``None`` uses
        ``Settings.sort_for_display``.
    element_plural_name : str
        Plural word for the values in the container.
    """

    __slots__ = ("_actual", "_meta", "_container_name", "_sortable", "_element_plural_name")

    def __init__(
        self,
        values: Iterable[Any],
        meta: ExpectMeta,
        container_name: str = "values",
        sortable: bool | None = None,
        element_plural_name: str = "elements",
    ) -> None:
        # One-shot iterators are materialized and a bare string is one value,
        # so size and membership checks see the same elements
        if isinstance(values, (str, bytes)) or not isinstance(values, Collection):
            values = to_list(values)
        self._actual = values
        self._meta = meta
        self._container_name = container_name
        self._sortable = get_settings().sort_for_display if sortable is None else sortable
        self._element_plural_name = element_plural_name

    @property
    def actual(self) -> Collection[Any]:
        return self._actual

    @property
    def meta(self) -> ExpectMeta:
        return self._meta

    @property
    def container_name(self) -> str:
        return self._container_name

    @property
    def sortable(self) -> bool:
        return self._sortable

    @property
    def element_plural_name(self) -> str:
        return self._element_plural_name

    def has_size(self, expected: int) -> CheckResult:
        """Assert that the collection has ``expected`` elements."""
        return IntSubject(
            len(self.actual),
            meta=self.meta.derive("size()"),
            mismatch_kind=ProblemKind.SIZE_MISMATCH,
        ).equals(expected)

    def contains(self, expected: Any) -> CheckResult:
        """Assert that ``expected`` is one of the values."""
        return self.contains_predicate(equals_wrapper(expected))

    def contains_exactly(self, expected: Iterable[Any]) -> OrderingResult:
        """Assert the collection holds exactly ``expected``, no more or less.

        Multiplicity is respected. Call ``in_order()`` on the result to also
        require the same relative order.
        """
        expected = to_list(expected)
        return check_contains_exactly(
            self.actual,
            expected,
            meta=self.meta,
            formatters=self._exact_formatters(expected),
        )

    def contains_exactly_predicates(self, expected: Iterable[Matcher]) -> OrderingResult:
        """Assert a 1:1 correspondence between the values and ``expected`` matchers.

        Matching is greedy in first-seen order: each matcher consumes the first
        value it matches. Overlapping matchers can therefore fail where another
        assignment would succeed. For example with values ``["a", "ab", "abc"]``
        and matchers ``[contains("a"), contains("b"), equals_wrapper("a")]`` the
        first two consume ``"a"`` and ``"ab"`` and ``<equals 'a'>`` only has
        ``"abc"`` left.
        """
        expected = to_list(expected)
        return check_contains_exactly_predicates(
            self.actual,
            expected,
            meta=self.meta,
            formatters=self._exact_formatters(expected),
        )

    def contains_at_least(self, expect_contains: Iterable[Any]) -> OrderingResult:
        """Assert all values of ``expect_contains`` are present; extras are allowed."""
        matchers = [equals_wrapper(expected) for expected in to_list(expect_contains)]
        return self.contains_at_least_predicates(matchers)

    def contains_at_least_predicates(self, matchers: Iterable[Matcher]) -> OrderingResult:
        """Assert every matcher matches a distinct value; extras are allowed."""
        return check_contains_at_least_predicates(
            self.actual,
            to_list(matchers),
            meta=self.meta,
            formatters=CollectionFormatters(
                format_actual=self._format_actual,
                sort=self.sortable,
                format_missing=lambda missing: format_problem_predicates_did_not_match(
                    missing,
                    element_plural_name=self.element_plural_name,
                    container_name=self.container_name,
                ),
            ),
        )

    def contains_none_of(self, values: Iterable[Any]) -> CheckResult:
        """Assert none of ``values`` are in the collection."""
        return check_contains_none_of(
            self.actual,
            to_list(values),
            meta=self.meta,
            sort=self.sortable,
        )

    def contains_predicate(self, matcher: Matcher) -> CheckResult:
        """Assert that ``matcher`` matches at least one value."""
        return check_contains_predicate(
            self.actual,
            matcher,
            meta=self.meta,
            format_actual=self._format_actual,
            sort=self.sortable,
        )

    def not_contains_predicate(self, matcher: Matcher) -> CheckResult:
        """Assert that ``matcher`` matches no values."""
        return check_not_contains_predicate(
            self.actual,
            matcher,
            meta=self.meta,
            sort=self.sortable,
        )

    def _format_actual(self) -> str:
        return format_actual_collection(
            to_list(self.actual),
            name=self.container_name,
            sort=self.sortable,
        )

    def _exact_formatters(self, expected: list[Any]) -> CollectionFormatters:
        # Actual and expected stay unsorted: an in_order() failure renders the same text
        return CollectionFormatters(
            format_actual=lambda: format_actual_collection(
                to_list(self.actual),
                name=self.container_name,
                sort=False,
            ),
            sort=False,
            format_expected=lambda: format_problem_expected_exactly(expected, sort=False),
            format_missing=lambda missing: format_problem_missing_required_values(
                missing,
                sort=self.sortable,
            ),
            format_unexpected=lambda unexpected: format_problem_unexpected_values(
                unexpected,
                sort=self.sortable,
            ),
        )
