"""Shared fixtures for unit tests."""

from collections.abc import Iterator

import pytest

from fluentcheck import CollectingSink, Expect, ExpectMeta, expect, sink_scope
from fluentcheck.config import set_settings
from fluentcheck.diagnostics.sink import reset_fallback_sink


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep environment-driven settings and the fallback sink out of other tests."""
    for name in ("FLUENTCHECK_MAX_REPR_LENGTH", "FLUENTCHECK_SORT_FOR_DISPLAY", "FLUENTCHECK_FAIL_FAST"):
        monkeypatch.delenv(name, raising=False)
    set_settings(None)
    reset_fallback_sink()
    yield
    set_settings(None)
    reset_fallback_sink()


@pytest.fixture
def sink() -> Iterator[CollectingSink]:
    """Provide a collecting sink bound as the active sink."""
    collecting = CollectingSink()
    with sink_scope(collecting):
        yield collecting


@pytest.fixture
def env(sink: CollectingSink) -> Expect:
    return expect(sink)


@pytest.fixture
def meta(sink: CollectingSink) -> ExpectMeta:
    return ExpectMeta(expr_chain=("collection",), sink=sink)
