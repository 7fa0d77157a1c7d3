"""Error types raised by diagnostic sinks."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fluentcheck.diagnostics.models import Diagnostic


class AssertionFailedError(AssertionError):
    """AssertionError with the attached diagnostics that caused it."""

    def __init__(self, diagnostics: Sequence[Diagnostic]):
        self.diagnostics = list(diagnostics)
        count = len(self.diagnostics)
        header = f"{count} assertion{'s' if count != 1 else ''} failed"
        body = "\n\n".join(d.message for d in self.diagnostics if d.message)
        message = f"{header}:\n\n{body}" if body else header
        super().__init__(message)
