"""Subjects: fluent wrappers binding actual values to checks."""

from .collection import CollectionSubject
from .expect import Expect, expect
from .int_subject import IntSubject

__all__ = ["CollectionSubject", "Expect", "IntSubject", "expect"]
