"""Entry point for building subjects."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from fluentcheck.diagnostics.meta import ExpectMeta
from fluentcheck.diagnostics.sink import DiagnosticSink
from fluentcheck.subjects.collection import CollectionSubject
from fluentcheck.subjects.int_subject import IntSubject


class Expect:
    """Creates subjects that report to a common sink.

    Usage::

        sink = CollectingSink()
        env = expect(sink)
        env.that_collection([1, 2, 3]).contains_exactly([3, 2, 1]).in_order()
        sink.raise_if_failed()
    """

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self.sink = sink

    def that_collection(
        self,
        values: Iterable[Any],
        expr: str = "collection",
        *,
        container_name: str = "values",
        sortable: bool | None = None,
        element_plural_name: str = "elements",
    ) -> CollectionSubject:
        return CollectionSubject(
            values,
            meta=ExpectMeta(expr_chain=(expr,), sink=self.sink),
            container_name=container_name,
            sortable=sortable,
            element_plural_name=element_plural_name,
        )

    def that_int(self, value: int, expr: str = "int") -> IntSubject:
        return IntSubject(value, meta=ExpectMeta(expr_chain=(expr,), sink=self.sink))


def expect(sink: DiagnosticSink | None = None) -> Expect:
    """Return an :class:`Expect`; without a sink, the context-bound sink is used."""
    return Expect(sink)
