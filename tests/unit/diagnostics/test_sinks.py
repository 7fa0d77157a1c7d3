import io
import threading

import pytest
from rich.console import Console

from fluentcheck import (
    AssertionFailedError,
    CollectingSink,
    ConsoleSink,
    Diagnostic,
    DiagnosticSink,
    ExpectMeta,
    ProblemKind,
    RaisingSink,
    Settings,
    sink_scope,
)
from fluentcheck.config import set_settings
from fluentcheck.diagnostics.sink import get_current_sink


def _diagnostic(expr: str = "collection") -> Diagnostic:
    return Diagnostic(kind=ProblemKind.NO_MATCH_FOUND, expr=expr, message=f"in: {expr}\nboom")


def test_sinks_satisfy_protocol():
    assert isinstance(CollectingSink(), DiagnosticSink)
    assert isinstance(RaisingSink(), DiagnosticSink)
    assert isinstance(ConsoleSink(Console(file=io.StringIO())), DiagnosticSink)


def test_collecting_sink_raise_if_failed_carries_all_diagnostics():
    sink = CollectingSink()
    sink.report(_diagnostic("first"))
    sink.report(_diagnostic("second"))

    assert sink.failed
    with pytest.raises(AssertionFailedError) as exc_info:
        sink.raise_if_failed()

    assert [d.expr for d in exc_info.value.diagnostics] == ["first", "second"]
    assert str(exc_info.value).startswith("2 assertions failed")
    assert not sink.failed
    sink.raise_if_failed()


def test_collecting_sink_is_thread_safe():
    sink = CollectingSink()

    def worker():
        for _ in range(50):
            sink.report(_diagnostic())

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(sink.diagnostics) == 200


def test_raising_sink_raises_immediately():
    meta = ExpectMeta(expr_chain=("values",), sink=RaisingSink())

    with pytest.raises(AssertionFailedError, match="1 assertion failed"):
        meta.report(ProblemKind.MISSING_REQUIRED, "1 missing")


def test_console_sink_renders_and_collects():
    buffer = io.StringIO()
    sink = ConsoleSink(Console(file=buffer, width=120))

    sink.report(_diagnostic())

    output = buffer.getvalue()
    assert "no match found" in output
    assert "boom" in output
    assert len(sink.diagnostics) == 1


def test_sink_scope_binds_and_restores():
    outer = CollectingSink()
    inner = CollectingSink()

    with sink_scope(outer):
        assert get_current_sink() is outer
        with sink_scope(inner):
            assert get_current_sink() is inner
        assert get_current_sink() is outer


def test_fallback_sink_collects_and_warns(caplog: pytest.LogCaptureFixture):
    with caplog.at_level("WARNING", logger="fluentcheck.diagnostics.sink"):
        fallback = get_current_sink()

    assert isinstance(fallback, CollectingSink)
    assert get_current_sink() is fallback
    assert "No diagnostic sink bound" in caplog.text


def test_fallback_sink_honours_fail_fast():
    set_settings(Settings(fail_fast=True))

    assert isinstance(get_current_sink(), RaisingSink)
