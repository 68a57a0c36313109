"""
Tests for value classification.

Validates that:
1. Every Python value maps to exactly one Kind
2. Booleans are never numbers and integral floats are integers
3. Tuples are arrays unless arguments are distinguished
4. Regexes and dates are detected structurally
"""

import math
import re
from collections import OrderedDict, UserList
from datetime import date, datetime
from decimal import Decimal
from fractions import Fraction

import pytest

from ruleguard.rules.classify import classify
from ruleguard.rules.types import UNDEFINED, Kind


class TestNumbers:
    """Test the integer/float/nan/infinity split."""

    @pytest.mark.parametrize("value", [0, -7, 10**30, 3.0, -0.0, Decimal("4"), Fraction(6, 3)])
    def test_integers(self, value):
        """Integral values of any numeric type classify as integer."""
        assert classify(value) == Kind.INTEGER

    @pytest.mark.parametrize("value", [3.5, -0.1, Decimal("1.25"), Fraction(1, 3)])
    def test_floats(self, value):
        """Finite non-integral values classify as float."""
        assert classify(value) == Kind.FLOAT

    def test_nan(self):
        """NaN is its own kind, including Decimal NaN."""
        assert classify(math.nan) == Kind.NAN
        assert classify(Decimal("NaN")) == Kind.NAN
        assert classify(Decimal("sNaN")) == Kind.NAN

    def test_infinity(self):
        """Both infinities classify as infinity."""
        assert classify(math.inf) == Kind.INFINITY
        assert classify(-math.inf) == Kind.INFINITY
        assert classify(Decimal("-Infinity")) == Kind.INFINITY

    def test_booleans_are_not_numbers(self):
        """bool subclasses int but must classify as boolean."""
        assert classify(True) == Kind.BOOLEAN
        assert classify(False) == Kind.BOOLEAN


class TestScalars:
    """Test strings, null and undefined."""

    def test_string(self):
        assert classify("") == Kind.STRING
        assert classify("30") == Kind.STRING

    def test_null_and_undefined_differ(self):
        """None is null; only the UNDEFINED sentinel is undefined."""
        assert classify(None) == Kind.NULL
        assert classify(UNDEFINED) == Kind.UNDEFINED

    def test_bytes_are_not_arrays(self):
        """bytes is a Sequence but not a container of values."""
        assert classify(b"abc") == Kind.OBJECT


class TestComposites:
    """Test arrays, arguments and objects."""

    def test_sequences_are_arrays(self):
        assert classify([]) == Kind.ARRAY
        assert classify([1, "a"]) == Kind.ARRAY
        assert classify(range(3)) == Kind.ARRAY
        assert classify(UserList([1])) == Kind.ARRAY

    def test_tuple_is_array_by_default(self):
        assert classify((1, 2)) == Kind.ARRAY

    def test_tuple_is_arguments_when_distinguished(self):
        """The shape of *args reports as arguments only on request."""
        def collect(*args):
            return args

        assert classify(collect(1, 2), distinguish_arguments=True) == Kind.ARGUMENTS
        assert classify([1, 2], distinguish_arguments=True) == Kind.ARRAY

    def test_mappings_are_objects(self):
        assert classify({}) == Kind.OBJECT
        assert classify(OrderedDict(a=1)) == Kind.OBJECT

    def test_plain_instances_and_sets_are_objects(self):
        class Point:
            def __init__(self):
                self.x = 1

        assert classify(Point()) == Kind.OBJECT
        assert classify({1, 2}) == Kind.OBJECT


class TestStructuralDetection:
    """Test duck-typed regex, date and function detection."""

    def test_compiled_pattern_is_regex(self):
        assert classify(re.compile(r"^a+$")) == Kind.REGEX

    def test_regex_lookalike_is_regex(self):
        """Any object shaped like a compiled pattern counts."""
        class FakePattern:
            pattern = "x"
            flags = 0

            def search(self, text):
                return None

        assert classify(FakePattern()) == Kind.REGEX

    def test_dates(self):
        assert classify(date(2024, 1, 1)) == Kind.DATE
        assert classify(datetime(2024, 1, 1, 12, 30)) == Kind.DATE

    def test_callables_are_functions(self):
        assert classify(len) == Kind.FUNCTION
        assert classify(lambda: True) == Kind.FUNCTION
        assert classify(dict) == Kind.FUNCTION

    def test_kind_compares_to_plain_string(self):
        """Rules may name kinds with plain strings."""
        assert classify(3) == "integer"
        assert str(classify([])) == "array"
