"""Demonstrates collection assertions reporting to a shared sink."""

import io

from rich.console import Console

from fluentcheck import AssertionFailedError, ConsoleSink, expect
from fluentcheck.matching import contains, equals_wrapper, str_endswith


def build_outputs() -> list[str]:
    return ["libfoo.so", "foo.h", "foo_test"]


def main() -> None:
    sink = ConsoleSink(Console(file=io.StringIO()))
    env = expect(sink)
    outputs = env.that_collection(build_outputs(), expr="outputs", element_plural_name="files")

    outputs.has_size(3)
    outputs.contains_at_least_predicates([str_endswith(".so"), str_endswith(".h")]).in_order()
    outputs.contains_none_of(["foo.o"])

    # Greedy matching: <contains 'foo'> takes "libfoo.so" before <equals 'libfoo.so'> sees it
    outputs.contains_exactly_predicates(
        [contains("foo"), equals_wrapper("libfoo.so"), contains("test")]
    )

    try:
        sink.raise_if_failed()
    except AssertionFailedError as exc:
        print(exc)


if __name__ == "__main__":
    main()
