"""Diagnostic sinks and the context-scoped active sink.

Checks never raise on failure; they hand a :class:`Diagnostic` to a sink.
What happens next (collect, print, raise) is the sink's decision.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Protocol, runtime_checkable

from fluentcheck.config import get_settings
from fluentcheck.diagnostics.models import Diagnostic
from fluentcheck.errors import AssertionFailedError

logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticSink(Protocol):
    """Anything that accepts failure diagnostics."""

    def report(self, diagnostic: Diagnostic) -> None: ...


class CollectingSink:
    """Stores diagnostics until the caller inspects them or calls ``raise_if_failed``."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []
        self._lock = threading.Lock()

    def report(self, diagnostic: Diagnostic) -> None:
        logger.debug("Recorded %s failure for %s", diagnostic.kind.value, diagnostic.expr)
        with self._lock:
            self._diagnostics.append(diagnostic)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Snapshot of the diagnostics recorded so far."""
        with self._lock:
            return list(self._diagnostics)

    @property
    def failed(self) -> bool:
        with self._lock:
            return bool(self._diagnostics)

    def clear(self) -> list[Diagnostic]:
        """Retrieve and clear the recorded diagnostics."""
        with self._lock:
            diagnostics = list(self._diagnostics)
            self._diagnostics.clear()
            return diagnostics

    def raise_if_failed(self) -> None:
        """Raise :class:`AssertionFailedError` carrying every recorded diagnostic."""
        diagnostics = self.clear()
        if diagnostics:
            raise AssertionFailedError(diagnostics)


class RaisingSink:
    """Fail-fast sink: raises on the first diagnostic."""

    def report(self, diagnostic: Diagnostic) -> None:
        raise AssertionFailedError([diagnostic])


SINK_CONTEXT: ContextVar[DiagnosticSink | None] = ContextVar("diagnostic_sink", default=None)

_fallback_sink: DiagnosticSink | None = None
_fallback_lock = threading.Lock()


@contextmanager
def sink_scope(sink: DiagnosticSink) -> Iterator[DiagnosticSink]:
    """Bind ``sink`` as the active sink for the enclosed block."""
    token = SINK_CONTEXT.set(sink)
    try:
        yield sink
    finally:
        SINK_CONTEXT.reset(token)


def get_current_sink() -> DiagnosticSink:
    """Return the sink bound by :func:`sink_scope`, or the process fallback sink."""
    sink = SINK_CONTEXT.get()
    if sink is not None:
        return sink
    return _get_fallback_sink()


def _get_fallback_sink() -> DiagnosticSink:
    global _fallback_sink
    with _fallback_lock:
        if _fallback_sink is None:
            if get_settings().fail_fast:
                _fallback_sink = RaisingSink()
            else:
                _fallback_sink = CollectingSink()
            logger.warning(
                "No diagnostic sink bound; using process-wide %s",
                type(_fallback_sink).__name__,
            )
        return _fallback_sink


def reset_fallback_sink() -> None:
    """Drop the process fallback sink so the next lookup rebuilds it from settings."""
    global _fallback_sink
    with _fallback_lock:
        _fallback_sink = None
