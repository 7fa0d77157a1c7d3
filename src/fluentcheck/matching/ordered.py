"""Deferred order verification returned by membership checks."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from fluentcheck.diagnostics.formatting import format_problem_matched_out_of_order
from fluentcheck.diagnostics.meta import ExpectMeta
from fluentcheck.diagnostics.models import PASSED, CheckResult
from fluentcheck.matching.outcomes import MatchOutcome
from fluentcheck.types import ProblemKind

logger = logging.getLogger(__name__)


class OrderingResult:
    """Membership result plus an optional ``in_order()`` refinement.

    ``in_order()`` succeeds when matched elements appear in ``actual`` in the
    same relative order as the matchers were given. It can be called any
    number of times; each failing call reports again with the same content.
    """

    def __init__(
        self,
        *,
        outcome: MatchOutcome,
        result: CheckResult,
        expected: Sequence[str],
        actual: Sequence[Any],
        meta: ExpectMeta,
        format_actual: Callable[[], str],
        sort: bool = False,
        format_out_of_order: Callable[
            [Sequence[tuple[int, int]], Sequence[str], Sequence[Any]], str
        ] = format_problem_matched_out_of_order,
    ) -> None:
        self.outcome = outcome
        self.result = result
        self._expected = tuple(expected)
        self._actual = tuple(actual)
        self._meta = meta
        self._format_actual = format_actual
        self._sort = sort
        self._format_out_of_order = format_out_of_order

    @property
    def passed(self) -> bool:
        """Whether the membership check this result came from passed."""
        return self.result.passed

    def __bool__(self) -> bool:
        return self.passed

    def in_order(self) -> CheckResult:
        """Check that matches were found in the requested relative order."""
        assignment = self.outcome.assignment
        if self.outcome.passed and assignment.in_order:
            return PASSED

        problem = self._format_out_of_order(assignment.pairs, self._expected, self._actual)
        if not self.outcome.passed:
            # Partial assignment only; the order verdict is best effort here
            problem = f"membership check already failed; order not verifiable\n{problem}"
        logger.debug("Order check failed for %s: %s", self._meta.expr, assignment.pairs)

        diagnostic = self._meta.report(
            ProblemKind.OUT_OF_ORDER,
            problem,
            actual_text=self._format_actual(),
            actual=self._actual,
            sort=self._sort,
            expected=self._expected,
            out_of_order=assignment.out_of_order_pairs(),
            details={"assignment": [list(pair) for pair in assignment.pairs]},
        )
        return CheckResult(passed=False, kind=ProblemKind.OUT_OF_ORDER, diagnostic=diagnostic)
