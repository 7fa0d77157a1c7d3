"""Matchers: named predicates consumed by the matching engine.

The engine itself lives in :mod:`fluentcheck.matching.engine`.
"""

from .base import (
    Matcher,
    contains,
    custom,
    equals_wrapper,
    is_in,
    matcher,
    never,
    str_endswith,
    str_matches,
    str_startswith,
)

__all__ = [
    "Matcher",
    "matcher",
    "custom",
    "contains",
    "equals_wrapper",
    "is_in",
    "never",
    "str_endswith",
    "str_matches",
    "str_startswith",
]
