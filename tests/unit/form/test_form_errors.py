# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for per-attribute error tracking and validation result processing.
"""

import pytest

from formmodel.validation import Result, ResultSet


@pytest.fixture
def failing_results() -> ResultSet:
    return ResultSet(
        {
            "first_name": Result(errors=["Value cannot be blank.", "Too short."]),
            "age": Result(),
            "rating": Result(errors=["Must be positive."]),
        }
    )


class TestAddError:
    def test_add_error_appends_in_order(self, profile):
        profile.add_error("first_name", "one")
        profile.add_error("first_name", "two")

        assert profile.get_error("first_name") == ["one", "two"]
        assert profile.get_first_error("first_name") == "one"

    def test_errors_for_clean_attribute(self, profile):
        assert profile.get_error("age") == []
        assert profile.get_first_error("age") == ""
        assert profile.has_errors("age") is False

    def test_has_errors_global_and_scoped(self, profile):
        assert profile.has_errors() is False

        profile.add_error("age", "Too young.")

        assert profile.has_errors() is True
        assert profile.has_errors("age") is True
        assert profile.has_errors("first_name") is False

    def test_returned_errors_are_copies(self, profile):
        """Test callers cannot mutate the form's error store."""
        profile.add_error("age", "Too young.")

        profile.get_error("age").append("injected")
        profile.get_errors()["age"].append("injected")

        assert profile.get_error("age") == ["Too young."]


class TestClearErrors:
    def test_clear_single_attribute(self, profile):
        profile.add_error("age", "a")
        profile.add_error("rating", "b")

        profile.clear_errors("age")

        assert profile.has_errors("age") is False
        assert profile.get_errors() == {"rating": ["b"]}

    def test_clear_all(self, profile):
        profile.add_error("age", "a")
        profile.clear_errors()
        assert profile.get_errors() == {}

    def test_clear_resets_validated(self, profile):
        profile.process_validation_result(ResultSet())
        assert profile.is_validated() is True

        profile.clear_errors("age")

        assert profile.is_validated() is False


class TestProcessValidationResult:
    def test_all_valid_result_set(self, profile):
        """Test an all-valid result leaves no errors and marks the form validated."""
        results = ResultSet({"first_name": Result(), "age": Result()})

        profile.process_validation_result(results)

        assert profile.has_errors() is False
        assert profile.is_validated() is True

    def test_invalid_results_are_collected(self, profile, failing_results):
        profile.process_validation_result(failing_results)

        assert profile.get_errors() == {
            "first_name": ["Value cannot be blank.", "Too short."],
            "rating": ["Must be positive."],
        }
        assert profile.has_errors("age") is False
        assert profile.is_validated() is True

    def test_second_call_replaces_errors(self, profile, failing_results):
        """Test errors do not accumulate across validation cycles."""
        profile.process_validation_result(failing_results)
        profile.process_validation_result(
            ResultSet({"age": Result(errors=["Too old."])})
        )

        assert profile.get_errors() == {"age": ["Too old."]}

    def test_manual_errors_are_discarded(self, profile):
        profile.add_error("tags", "stale")
        profile.process_validation_result(ResultSet())
        assert profile.has_errors() is False

    def test_accepts_mapping_of_results(self, profile):
        profile.process_validation_result({"age": Result(errors=["Too old."])})
        assert profile.get_first_errors() == {"age": "Too old."}

    def test_accepts_foreign_result_objects(self, profile):
        """Test any object with is_valid()/get_errors() is accepted."""

        class ForeignResult:
            def is_valid(self):
                return False

            def get_errors(self):
                return ["From another validator."]

        profile.process_validation_result([("nickname", ForeignResult())])

        assert profile.get_error("nickname") == ["From another validator."]

    def test_not_validated_by_default(self, profile):
        assert profile.is_validated() is False


class TestErrorSummary:
    def test_first_errors_omit_clean_attributes(self, profile, failing_results):
        profile.process_validation_result(failing_results)

        assert profile.get_first_errors() == {
            "first_name": "Value cannot be blank.",
            "rating": "Must be positive.",
        }

    def test_summary_with_all_errors(self, profile, failing_results):
        profile.process_validation_result(failing_results)

        assert profile.get_error_summary(True) == [
            "Value cannot be blank.",
            "Too short.",
            "Must be positive.",
        ]

    def test_summary_with_first_errors_only(self, profile, failing_results):
        profile.process_validation_result(failing_results)

        assert profile.get_error_summary(False) == [
            "Value cannot be blank.",
            "Must be positive.",
        ]

    def test_summary_of_clean_form(self, profile):
        assert profile.get_error_summary(True) == []
        assert profile.get_error_summary(False) == []
