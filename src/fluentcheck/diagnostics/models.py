"""Structured records handed to diagnostic sinks."""

from __future__ import annotations

from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, SerializationInfo, field_serializer

from fluentcheck.config import get_settings
from fluentcheck.types import ProblemKind


def truncate_repr(value: Any, max_len: int) -> str:
    """Return ``repr(value)``, shortened with ``...`` when longer than ``max_len``."""
    s = repr(value)
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


class Diagnostic(BaseModel):
    """One failing check, as reported to a sink.

    Attributes:
    ----------
    kind: ProblemKind
        What went wrong
    expr: str
        Call chain that produced the check, e.g. ``collection.size()``
    actual: tuple
        The actual values under test
    sort: bool
        Whether ``actual`` may be sorted for display
    expected: tuple[str, ...]
        Reprs of expected values or matcher descriptions
    missing: tuple
        Expected values or matcher descriptions that found no element
    unexpected: tuple
        Actual elements left over, found-but-forbidden, or unwanted matches
    out_of_order: tuple[tuple[int, int], ...]
        ``(matcher_index, actual_index)`` pairs that broke the requested order
    message: str | None
        Rendered failure text
    details: dict
        Extra values specific to the check (e.g. scalar ``actual``/``expected``)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    diagnostic_id: UUID = Field(default_factory=uuid4)
    kind: ProblemKind
    expr: str
    actual: tuple[Any, ...] = ()
    sort: bool = False
    expected: tuple[str, ...] = ()
    missing: tuple[Any, ...] = ()
    unexpected: tuple[Any, ...] = ()
    out_of_order: tuple[tuple[int, int], ...] = ()
    message: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)

    @field_serializer("actual", "missing", "unexpected")
    def _render_values(self, values: tuple[Any, ...], info: SerializationInfo) -> list[Any]:
        """Render arbitrary elements as reprs, truncated when requested."""
        ctx = info.context or {}
        if not ctx.get("truncate"):
            return [repr(v) for v in values]
        max_len = ctx.get("max_len") or get_settings().max_repr_length
        return [truncate_repr(v, max_len) for v in values]

    @field_serializer("details")
    def _render_details(self, details: dict[str, Any]) -> dict[str, Any]:
        return {
            key: value if isinstance(value, (str, int, float, bool, type(None))) else repr(value)
            for key, value in details.items()
        }


class CheckResult(BaseModel):
    """Result of one membership or scalar check.

    Attributes:
    ----------
    passed: bool
        Whether the check passed
    kind: ProblemKind | None
        Problem kind when the check failed
    diagnostic: Diagnostic | None
        The record handed to the sink when the check failed
    """

    model_config = ConfigDict(frozen=True)

    passed: bool
    kind: ProblemKind | None = None
    diagnostic: Diagnostic | None = None

    def __repr__(self) -> str:
        return self.model_dump_json(
            indent=2,
            exclude_none=True,
            context={"truncate": True},
        )

    def __bool__(self) -> bool:
        return self.passed


PASSED = CheckResult(passed=True)
