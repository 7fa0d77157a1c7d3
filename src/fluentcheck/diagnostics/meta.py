"""Call-chain metadata carried by every subject."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from fluentcheck.diagnostics.models import Diagnostic
from fluentcheck.diagnostics.sink import DiagnosticSink, get_current_sink
from fluentcheck.types import ProblemKind


@dataclass(frozen=True, slots=True)
class ExpectMeta:
    """Where a subject came from and where its failures go.

    Attributes
    ----------
    expr_chain
        Expression fragments from the root subject down, e.g.
        ``("collection", "size()")``.
    sink
        Sink receiving failures. ``None`` resolves the context-bound sink at
        report time.
    """

    expr_chain: tuple[str, ...] = ("value",)
    sink: DiagnosticSink | None = field(default=None, compare=False)

    @property
    def expr(self) -> str:
        return ".".join(self.expr_chain)

    def derive(self, expr: str) -> ExpectMeta:
        """Child metadata for a sub-subject, e.g. ``meta.derive("size()")``."""
        return ExpectMeta(expr_chain=(*self.expr_chain, expr), sink=self.sink)

    def report(
        self,
        kind: ProblemKind,
        problem: str,
        *,
        actual_text: str | None = None,
        actual: Iterable[Any] = (),
        **fields: Any,
    ) -> Diagnostic:
        """Build a :class:`Diagnostic` for this call chain and hand it to the sink."""
        parts = [f"in: {self.expr}", problem]
        if actual_text:
            parts.append(actual_text)
        diagnostic = Diagnostic(
            kind=kind,
            expr=self.expr,
            actual=tuple(actual),
            message="\n".join(parts),
            **fields,
        )
        sink = self.sink if self.sink is not None else get_current_sink()
        sink.report(diagnostic)
        return diagnostic
