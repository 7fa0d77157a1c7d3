"""Failure text rendering for collection checks."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from fluentcheck.matching.base import Matcher


def sort_for_display(values: Iterable[Any]) -> list[Any]:
    """Sort values, falling back to repr order for mixed or unorderable types."""
    values = list(values)
    try:
        return sorted(values)
    except TypeError:
        return sorted(values, key=_display)


def enumerate_list_as_lines(values: Sequence[Any], prefix: str = "") -> str:
    """Render ``values`` one per line as ``<index>: <repr>``."""
    if not values:
        return f"{prefix}<empty>"
    return "\n".join(f"{prefix}{i}: {_display(v)}" for i, v in enumerate(values))


def _display(value: Any) -> str:
    if isinstance(value, Matcher):
        return value.description
    return repr(value)


def format_actual_collection(actual: Sequence[Any], name: str = "values", sort: bool = True) -> str:
    values = sort_for_display(actual) if sort else list(actual)
    return f"actual {name}:\n{enumerate_list_as_lines(values, prefix='  ')}"


def format_problem_expected_exactly(expected: Sequence[Any], sort: bool = True) -> str:
    values = sort_for_display(expected) if sort else list(expected)
    return f"expected exactly:\n{enumerate_list_as_lines(values, prefix='  ')}"


def format_problem_missing_required_values(missing: Sequence[Any], sort: bool = True) -> str:
    values = sort_for_display(missing) if sort else list(missing)
    return f"{len(values)} missing:\n{enumerate_list_as_lines(values, prefix='  ')}"


def format_problem_unexpected_values(unexpected: Sequence[Any], sort: bool = True) -> str:
    values = sort_for_display(unexpected) if sort else list(unexpected)
    return f"{len(values)} unexpected:\n{enumerate_list_as_lines(values, prefix='  ')}"


def format_problem_predicates_did_not_match(
    missing: Sequence[Any],
    element_plural_name: str = "elements",
    container_name: str = "values",
) -> str:
    lines = enumerate_list_as_lines(list(missing), prefix="  ")
    return (
        f"{len(missing)} expected {element_plural_name} missing from {container_name}:\n{lines}"
    )


def format_problem_matched_out_of_order(
    matches: Sequence[tuple[int, int]],
    expected: Sequence[str],
    actual: Sequence[Any],
) -> str:
    """Render assignment pairs in request order, flagging each pair that went backwards."""
    lines = []
    previous = -1
    any_out_of_order = False
    for matcher_index, actual_index in matches:
        marker = ""
        if actual_index <= previous:
            marker = "  <-- out of order"
            any_out_of_order = True
        lines.append(
            f"  {matcher_index}: {expected[matcher_index]} matched at index {actual_index}"
            f" ({actual[actual_index]!r}){marker}"
        )
        previous = max(previous, actual_index)
    body = "\n".join(lines) if lines else "  <no matches>"
    if any_out_of_order:
        return f"expected values found, but with incorrect order:\n{body}"
    return f"matches in requested order:\n{body}"


def format_problem_forbidden_values(found: Sequence[Any], sort: bool = True) -> str:
    values = sort_for_display(found) if sort else list(found)
    return f"expected not to contain any of:\n{enumerate_list_as_lines(values, prefix='  ')}"


@dataclass(frozen=True, slots=True)
class CollectionFormatters:
    """Rendering hooks passed from a subject into the matching engine.

    Every hook except ``format_actual`` has a default. ``sort`` states whether
    ``format_actual`` sorts the values and is recorded on the diagnostic.
    """

    format_actual: Callable[[], str]
    sort: bool = True
    format_expected: Callable[[], str] | None = None
    format_missing: Callable[[Sequence[Any]], str] = format_problem_missing_required_values
    format_unexpected: Callable[[Sequence[Any]], str] = format_problem_unexpected_values
    format_out_of_order: Callable[
        [Sequence[tuple[int, int]], Sequence[str], Sequence[Any]], str
    ] = format_problem_matched_out_of_order
