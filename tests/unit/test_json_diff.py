"""Tests for the structural differ: dispatch, messages, paths, and ordering."""

from __future__ import annotations

import math
import unittest

from semjson.core.json_diff import json_diff
from semjson.core.types import DiffKind


def _summary(diffs) -> list[tuple[str, str, str]]:
    return [(d.kind.value, str(d.left_path), str(d.right_path)) for d in diffs]


# ============================================================================
# Equal values
# ============================================================================


class TestNoDiff(unittest.TestCase):
    def test_identical_values(self):
        samples = [
            None,
            True,
            0,
            1.25,
            "s",
            [],
            {},
            {"a": [1, {"b": None}], "c": "x"},
            [[[]], {"k": False}],
        ]
        for value in samples:
            self.assertEqual(json_diff(value, value), [], value)

    def test_int_and_float_compare_as_numbers(self):
        self.assertEqual(json_diff({"a": 1}, {"a": 1.0}), [])

    def test_nan_equals_nan(self):
        self.assertEqual(json_diff([math.nan], [math.nan]), [])

    def test_tuple_is_array(self):
        self.assertEqual(json_diff([1, 2], (1, 2)), [])


# ============================================================================
# Scalars
# ============================================================================


class TestScalarDiffs(unittest.TestCase):
    def test_number_inequality(self):
        diffs = json_diff({"a": 1}, {"a": 2})
        self.assertEqual(_summary(diffs), [("eq", "/a", "/a")])
        self.assertEqual(diffs[0].message, "Both sides should be equal numbers")

    def test_string_inequality(self):
        diffs = json_diff("a", "b")
        self.assertEqual(_summary(diffs), [("eq", "/", "/")])
        self.assertEqual(diffs[0].message, "Both sides should be equal strings")

    def test_boolean_true_false(self):
        diffs = json_diff({"a": True}, {"a": False})
        self.assertEqual(len(diffs), 1)
        self.assertEqual(diffs[0].kind, DiffKind.EQUALITY)
        self.assertEqual(
            diffs[0].message, "The left side is true and the right side is false"
        )

    def test_boolean_false_true(self):
        diffs = json_diff({"a": False}, {"a": True})
        self.assertEqual(
            diffs[0].message, "The left side is false and the right side is true"
        )

    def test_type_messages(self):
        cases = [
            ("s", 1, "Both types should be strings"),
            (1, "1", "Both types should be numbers"),
            (True, 1, "Both types should be booleans"),
            (1, True, "Both types should be numbers"),
            (None, 0, "Both types should be nulls"),
            (None, {}, "Both types should be nulls"),
            ({}, None, "Both types should be objects"),
            ({}, [], "Both types should be objects"),
            ([], {}, "Both types should be arrays"),
            ([], "[]", "Both types should be arrays"),
        ]
        for left, right, message in cases:
            diffs = json_diff(left, right)
            self.assertEqual(len(diffs), 1, (left, right))
            self.assertEqual(diffs[0].kind, DiffKind.TYPE)
            self.assertEqual(diffs[0].message, message)

    def test_non_null_left_against_null_uses_left_branch(self):
        diffs = json_diff({"a": "x"}, {"a": None})
        self.assertEqual(_summary(diffs), [("type", "/a", "/a")])
        self.assertEqual(diffs[0].message, "Both types should be strings")

    def test_unsupported_value_rejected(self):
        with self.assertRaises(TypeError):
            json_diff(object(), 1)


# ============================================================================
# Objects
# ============================================================================


class TestObjectDiffs(unittest.TestCase):
    def test_missing_on_right(self):
        diffs = json_diff({"a": 1}, {})
        self.assertEqual(_summary(diffs), [("missing", "/a", "/")])
        self.assertEqual(
            diffs[0].message, "Missing property 'a' from the object on the right side"
        )

    def test_missing_on_left(self):
        diffs = json_diff({}, {"b": 1})
        self.assertEqual(_summary(diffs), [("missing", "/", "/b")])
        self.assertEqual(
            diffs[0].message, "Missing property 'b' from the object on the left side"
        )

    def test_nested_type_mismatch(self):
        diffs = json_diff({"a": {"b": 1}}, {"a": [1]})
        self.assertEqual(_summary(diffs), [("type", "/a", "/a")])
        self.assertEqual(diffs[0].message, "Both types should be objects")

    def test_nested_missing_uses_parent_path(self):
        diffs = json_diff({"a": {"b": 1, "c": 2}}, {"a": {"c": 2, "d": 3}})
        self.assertEqual(
            _summary(diffs), [("missing", "/a/b", "/a"), ("missing", "/a", "/a/d")]
        )

    def test_pass_order(self):
        diffs = json_diff({"a": 1, "c": 1}, {"b": 1, "c": 2})
        self.assertEqual(
            _summary(diffs),
            [("missing", "/a", "/"), ("eq", "/c", "/c"), ("missing", "/", "/b")],
        )

    def test_insertion_order_does_not_change_output(self):
        self.assertEqual(
            json_diff({"c": 1, "a": 1}, {"z": 1, "y": 1}),
            json_diff({"a": 1, "c": 1}, {"y": 1, "z": 1}),
        )

    def test_plain_objects_report_right_only_key_once(self):
        diffs = json_diff({"a": 1}, {"a": 1, "b": 2, "c": 3})
        self.assertEqual(
            _summary(diffs), [("missing", "/", "/b"), ("missing", "/", "/c")]
        )

    def test_shorter_declared_length_reports_right_only_keys_twice(self):
        diffs = json_diff({"length": 1}, {"length": 2, "b": 1})
        self.assertEqual(
            _summary(diffs),
            [
                ("missing", "/", "/b"),
                ("eq", "/length", "/length"),
                ("missing", "/", "/b"),
            ],
        )
        self.assertEqual(
            diffs[0].message,
            "The right side of this object has more items than the left side",
        )
        self.assertEqual(
            diffs[2].message, "Missing property 'b' from the object on the left side"
        )

    def test_non_numeric_length_members_do_not_trigger_first_pass(self):
        diffs = json_diff({"length": "1"}, {"length": "2", "b": 1})
        self.assertEqual(
            _summary(diffs), [("eq", "/length", "/length"), ("missing", "/", "/b")]
        )

    def test_results_are_not_accumulated_between_calls(self):
        first = json_diff({"a": 1}, {"a": 2})
        second = json_diff({"a": 1}, {"a": 2})
        self.assertEqual(first, second)
        self.assertEqual(len(second), 1)


# ============================================================================
# Arrays
# ============================================================================


class TestArrayDiffs(unittest.TestCase):
    def test_right_longer(self):
        diffs = json_diff({"a": [1, 2]}, {"a": [1, 2, 3]})
        self.assertEqual(_summary(diffs), [("missing", "/a", "/a/[2]")])
        self.assertEqual(
            diffs[0].message, "Missing element 2 from the array on the left side"
        )

    def test_left_longer(self):
        diffs = json_diff([1, 2, 3], [1])
        self.assertEqual(
            _summary(diffs), [("missing", "/[1]", "/"), ("missing", "/[2]", "/")]
        )
        self.assertEqual(
            diffs[0].message, "Missing element 1 from the array on the right side"
        )

    def test_right_only_tail_reported_before_elementwise(self):
        diffs = json_diff([1], [2, 3])
        self.assertEqual(
            _summary(diffs), [("missing", "/", "/[1]"), ("eq", "/[0]", "/[0]")]
        )

    def test_elementwise_recursion_across_mixed_elements(self):
        diffs = json_diff([1, "x", None, [True]], ["1", "x", None, [False]])
        self.assertEqual(
            _summary(diffs), [("type", "/[0]", "/[0]"), ("eq", "/[3]/[0]", "/[3]/[0]")]
        )

    def test_positional_not_lcs(self):
        diffs = json_diff(["a", "b"], ["b", "a"])
        self.assertEqual(
            _summary(diffs), [("eq", "/[0]", "/[0]"), ("eq", "/[1]", "/[1]")]
        )


if __name__ == "__main__":
    unittest.main()
