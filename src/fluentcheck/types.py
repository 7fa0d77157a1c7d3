"""Shared types for the fluentcheck assertion library."""

from enum import Enum


class ProblemKind(Enum):
    """Kind of problem an assertion reports to the diagnostic sink."""

    SIZE_MISMATCH = "size_mismatch"
    MISSING_REQUIRED = "missing_required"
    UNEXPECTED_PRESENT = "unexpected_present"  # exactly-mode only
    FORBIDDEN_PRESENT = "forbidden_present"
    NO_MATCH_FOUND = "no_match_found"
    UNWANTED_MATCH_FOUND = "unwanted_match_found"
    OUT_OF_ORDER = "out_of_order"
    NOT_EQUAL = "not_equal"
    COMPARISON_FAILED = "comparison_failed"
