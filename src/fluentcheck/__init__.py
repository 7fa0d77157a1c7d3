"""fluentcheck - fluent collection assertions with structured diagnostics."""

from .config import Settings, get_settings
from .diagnostics import (
    CheckResult,
    CollectingSink,
    ConsoleSink,
    Diagnostic,
    DiagnosticSink,
    ExpectMeta,
    RaisingSink,
    sink_scope,
)
from .errors import AssertionFailedError
from .matching import Matcher, matcher
from .matching.ordered import OrderingResult
from .subjects import CollectionSubject, Expect, IntSubject, expect
from .types import ProblemKind
from .version import __version__


__all__ = [
    # Subjects
    "expect",
    "Expect",
    "CollectionSubject",
    "IntSubject",
    "OrderingResult",
    # Matchers
    "Matcher",
    "matcher",
    # Diagnostics
    "CheckResult",
    "Diagnostic",
    "DiagnosticSink",
    "CollectingSink",
    "ConsoleSink",
    "RaisingSink",
    "ExpectMeta",
    "sink_scope",
    "ProblemKind",
    "AssertionFailedError",
    # Configuration
    "Settings",
    "get_settings",
]
