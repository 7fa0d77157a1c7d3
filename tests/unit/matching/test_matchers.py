import pytest

from fluentcheck.matching import (
    Matcher,
    contains,
    custom,
    equals_wrapper,
    is_in,
    matcher,
    never,
    str_endswith,
    str_matches,
    str_startswith,
)
from fluentcheck.matching.base import ensure_matchers


def test_equals_wrapper_uses_host_equality_and_repr_description():
    m = equals_wrapper("a")

    assert m.description == "<equals 'a'>"
    assert m("a")
    assert not m("ab")
    assert equals_wrapper(1)(1.0)


def test_matcher_decorator_builds_matcher():
    @matcher("<is even>")
    def is_even(value):
        return value % 2 == 0

    assert isinstance(is_even, Matcher)
    assert str(is_even) == "<is even>"
    assert is_even(4)
    assert not is_even(3)


def test_string_matchers():
    assert contains("b")("abc")
    assert str_startswith("ab")("abc")
    assert not str_startswith("bc")("abc")
    assert str_endswith("bc")("abc")
    assert str_matches("lib*.so")("libfoo.so")
    assert not str_matches("lib*.so")("libfoo.a")


def test_is_in_and_never():
    assert is_in([1, 2])(2)
    assert not is_in([1, 2])(3)
    assert not never("<nothing>")(None)


def test_is_in_reads_a_one_shot_iterable_once():
    m = is_in(v for v in (1, 2))

    assert m.description == "<is any of [1, 2]>"
    assert m(2)
    assert m(1)
    assert not m(3)


def test_custom_result_is_coerced_to_bool():
    m = custom("<truthy>", lambda value: value)

    assert m([1]) is True
    assert m([]) is False


def test_matchers_are_immutable():
    m = equals_wrapper(1)

    with pytest.raises(AttributeError):
        m.description = "other"


def test_ensure_matchers_rejects_plain_values():
    with pytest.raises(TypeError, match="got str"):
        ensure_matchers([equals_wrapper(1), "x"])
