"""Results of one greedy matching pass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchAssignment:
    """Pairs of ``(matcher_index, actual_index)`` in increasing matcher order.

    Each actual index appears at most once and each matcher index at most once.
    """

    pairs: tuple[tuple[int, int], ...] = ()

    @property
    def actual_indices(self) -> tuple[int, ...]:
        return tuple(actual_index for _, actual_index in self.pairs)

    def out_of_order_pairs(self) -> tuple[tuple[int, int], ...]:
        """Pairs whose actual index does not exceed every earlier one."""
        offending = []
        highest = -1
        for matcher_index, actual_index in self.pairs:
            if actual_index <= highest:
                offending.append((matcher_index, actual_index))
            highest = max(highest, actual_index)
        return tuple(offending)

    @property
    def in_order(self) -> bool:
        indices = self.actual_indices
        return all(a < b for a, b in zip(indices, indices[1:]))


@dataclass(frozen=True, slots=True)
class MatchOutcome:
    """Membership verdict for one matching pass.

    Attributes
    ----------
    assignment
        Which actual element each matched matcher consumed.
    missing
        Indices of matchers that found no available element.
    unconsumed
        Indices of actual elements no matcher consumed.
    exact
        True for "contains exactly" semantics, where leftovers count as failure.
    """

    assignment: MatchAssignment
    missing: tuple[int, ...]
    unconsumed: tuple[int, ...]
    exact: bool

    @property
    def unexpected(self) -> tuple[int, ...]:
        """Leftover actual indices that count against the check."""
        return self.unconsumed if self.exact else ()

    @property
    def passed(self) -> bool:
        return not self.missing and not self.unexpected
