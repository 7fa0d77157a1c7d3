import pytest

from fluentcheck import CollectingSink, Expect, ProblemKind
from fluentcheck.matching import contains, custom, equals_wrapper, str_endswith


def test_has_size(env: Expect, sink: CollectingSink):
    subject = env.that_collection([1, 2, 3])

    assert subject.has_size(3)
    result = subject.has_size(4)

    assert result.kind is ProblemKind.SIZE_MISMATCH
    [diagnostic] = sink.diagnostics
    assert diagnostic.expr == "collection.size()"
    assert diagnostic.details == {"actual": 3, "expected": 4}


def test_contains_single_value(env: Expect, sink: CollectingSink):
    subject = env.that_collection(["x", "y"])

    assert subject.contains("y")
    assert not subject.contains("z")
    assert "expected to contain: <equals 'z'>" in sink.diagnostics[0].message


def test_contains_exactly_then_in_order(env: Expect, sink: CollectingSink):
    subject = env.that_collection([1, 1, 2])

    ordered = subject.contains_exactly([1, 2, 1])

    assert ordered.passed
    assert not ordered.in_order()
    assert [d.kind for d in sink.diagnostics] == [ProblemKind.OUT_OF_ORDER]


def test_contains_exactly_predicates_greedy_stealing(env: Expect, sink: CollectingSink):
    subject = env.that_collection(["a", "ab", "abc"])

    ordered = subject.contains_exactly_predicates(
        [contains("a"), contains("b"), equals_wrapper("a")]
    )

    assert not ordered
    [diagnostic] = sink.diagnostics
    assert diagnostic.missing == ("<equals 'a'>",)
    assert diagnostic.unexpected == ("abc",)
    assert diagnostic.message.startswith("in: collection\nexpected exactly:")


def test_exact_failure_text_is_unsorted_for_actual_and_expected(env: Expect, sink: CollectingSink):
    env.that_collection([3, 1], container_name="srcs").contains_exactly([2, 1])

    message = sink.diagnostics[0].message
    assert "expected exactly:\n  0: 2\n  1: 1" in message
    assert "actual srcs:\n  0: 3\n  1: 1" in message


def test_contains_at_least_with_slack(env: Expect, sink: CollectingSink):
    ordered = env.that_collection([1, 2, 3, 4]).contains_at_least([2, 4])

    assert ordered.passed
    assert ordered.in_order().passed
    assert sink.diagnostics == []


def test_contains_at_least_predicates_missing_uses_element_names(env: Expect, sink: CollectingSink):
    subject = env.that_collection(
        ["lib.so", "main.c"], container_name="outputs", element_plural_name="files"
    )

    ordered = subject.contains_at_least_predicates([str_endswith(".so"), str_endswith(".h")])

    assert not ordered
    assert "1 expected files missing from outputs:\n  0: <ends with '.h'>" in sink.diagnostics[0].message


def test_contains_none_of(env: Expect, sink: CollectingSink):
    subject = env.that_collection([1, 2, 3])

    assert subject.contains_none_of([4, 5])
    result = subject.contains_none_of([2, 9])

    assert result.kind is ProblemKind.FORBIDDEN_PRESENT
    assert sink.diagnostics[0].unexpected == (2,)


def test_predicate_existence_checks(env: Expect, sink: CollectingSink):
    is_negative = custom("<is negative>", lambda v: v < 0)
    subject = env.that_collection([3, -1, 2, -5])

    assert subject.contains_predicate(is_negative)
    assert not subject.not_contains_predicate(is_negative)
    assert sink.diagnostics[0].unexpected == (-1, -5)


def test_set_arguments_are_converted_in_iteration_order(env: Expect):
    values = {"b", "a"}
    ordered = env.that_collection(list(values)).contains_exactly(values)

    assert ordered.passed
    assert ordered.in_order().passed


def test_generators_are_materialized_once(env: Expect):
    subject = env.that_collection(v for v in [1, 2])

    assert subject.has_size(2)
    assert subject.contains_exactly([1, 2])


def test_unsortable_subject_keeps_actual_order(env: Expect, sink: CollectingSink):
    env.that_collection([3, 1, 2], sortable=False).contains_none_of([1])

    assert "actual values:\n  0: 3\n  1: 1\n  2: 2" in sink.diagnostics[0].message


def test_bare_string_is_a_single_value_for_every_check(env: Expect, sink: CollectingSink):
    subject = env.that_collection("abc")

    assert subject.actual == ["abc"]
    assert subject.has_size(len(subject.actual))
    assert subject.contains_exactly(["abc"])
    assert sink.diagnostics == []


def test_size_of_a_mapping_counts_its_keys(env: Expect):
    subject = env.that_collection({"x": 1, "y": 2})

    assert subject.has_size(2)
    assert subject.contains_exactly(["x", "y"])


def test_subject_attributes_are_read_only(env: Expect):
    subject = env.that_collection([1, 2], container_name="srcs")

    with pytest.raises(AttributeError):
        subject.actual = [3]
    with pytest.raises(AttributeError):
        subject.container_name = "outs"
    with pytest.raises(AttributeError):
        subject.extra = True

    assert subject.actual == [1, 2]
    assert subject.container_name == "srcs"


@pytest.mark.parametrize("sortable", [True, False])
def test_sortable_subject_records_sort_flag(env: Expect, sink: CollectingSink, sortable: bool):
    subject = env.that_collection([2, 1], sortable=sortable)
    is_negative = custom("<is negative>", lambda v: v < 0)
    is_positive = custom("<is positive>", lambda v: v > 0)

    subject.contains_at_least([5])
    subject.contains_at_least_predicates([is_negative])
    subject.contains(7)
    subject.contains_predicate(is_negative)
    subject.contains_none_of([1])
    subject.not_contains_predicate(is_positive)

    assert len(sink.diagnostics) == 6
    assert [d.sort for d in sink.diagnostics] == [sortable] * 6
    expected_text = "actual values:\n  0: 1\n  1: 2" if sortable else "actual values:\n  0: 2\n  1: 1"
    assert all(expected_text in d.message for d in sink.diagnostics)


def test_at_least_order_failure_records_sort_flag(env: Expect, sink: CollectingSink):
    ordered = env.that_collection([2, 1], sortable=True).contains_at_least([1, 2])

    assert ordered.passed
    assert not ordered.in_order()
    [diagnostic] = sink.diagnostics
    assert diagnostic.sort is True
    assert "actual values:\n  0: 1\n  1: 2" in diagnostic.message


def test_exact_checks_record_unsorted_actual(env: Expect, sink: CollectingSink):
    subject = env.that_collection([2, 1], sortable=True)

    subject.contains_exactly([1, 3])
    subject.contains_exactly_predicates([equals_wrapper(9)])
    subject.contains_exactly([1, 2]).in_order()

    assert [d.kind for d in sink.diagnostics] == [
        ProblemKind.MISSING_REQUIRED,
        ProblemKind.MISSING_REQUIRED,
        ProblemKind.OUT_OF_ORDER,
    ]
    assert [d.sort for d in sink.diagnostics] == [False, False, False]
