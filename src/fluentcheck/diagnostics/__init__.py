"""Failure reporting: diagnostic records, sinks and text rendering."""

from .console import ConsoleSink
from .meta import ExpectMeta
from .models import CheckResult, Diagnostic
from .sink import (
    CollectingSink,
    DiagnosticSink,
    RaisingSink,
    get_current_sink,
    sink_scope,
)

__all__ = [
    "CheckResult",
    "CollectingSink",
    "ConsoleSink",
    "Diagnostic",
    "DiagnosticSink",
    "ExpectMeta",
    "RaisingSink",
    "get_current_sink",
    "sink_scope",
]
