"""IntSubject: scalar comparisons on integers."""

from __future__ import annotations

from collections.abc import Collection

from fluentcheck.diagnostics.meta import ExpectMeta
from fluentcheck.diagnostics.models import PASSED, CheckResult
from fluentcheck.types import ProblemKind


class IntSubject:
    """Wraps an int for equality and ordering assertions.

    Parameters
    ----------
    actual : int
        The value under test.
    meta : ExpectMeta
        Call-chain metadata; failures are reported through it.
    mismatch_kind : ProblemKind
        Kind reported when ``equals`` fails. ``has_size`` uses
        ``ProblemKind.SIZE_MISMATCH``.
    """

    def __init__(
        self,
        actual: int,
        meta: ExpectMeta,
        mismatch_kind: ProblemKind = ProblemKind.NOT_EQUAL,
    ) -> None:
        self.actual = actual
        self.meta = meta
        self._mismatch_kind = mismatch_kind

    def equals(self, expected: int) -> CheckResult:
        if self.actual == expected:
            return PASSED
        return self._fail(self._mismatch_kind, f"expected: {expected}", expected=expected)

    def not_equals(self, unexpected: int) -> CheckResult:
        if self.actual != unexpected:
            return PASSED
        return self._fail(
            ProblemKind.COMPARISON_FAILED, f"expected not to be: {unexpected}", expected=unexpected
        )

    def is_greater_than(self, other: int) -> CheckResult:
        if self.actual > other:
            return PASSED
        return self._fail(
            ProblemKind.COMPARISON_FAILED, f"expected to be greater than: {other}", expected=other
        )

    def is_at_least(self, minimum: int) -> CheckResult:
        if self.actual >= minimum:
            return PASSED
        return self._fail(
            ProblemKind.COMPARISON_FAILED, f"expected to be at least: {minimum}", expected=minimum
        )

    def is_in(self, values: Collection[int]) -> CheckResult:
        if self.actual in values:
            return PASSED
        return self._fail(
            ProblemKind.COMPARISON_FAILED,
            f"expected any of: {sorted(values)}",
            expected=sorted(values),
        )

    def _fail(self, kind: ProblemKind, problem: str, *, expected: object) -> CheckResult:
        diagnostic = self.meta.report(
            kind,
            problem,
            actual_text=f"actual: {self.actual}",
            actual=(self.actual,),
            expected=(repr(expected),),
            details={"actual": self.actual, "expected": expected},
        )
        return CheckResult(passed=False, kind=kind, diagnostic=diagnostic)
