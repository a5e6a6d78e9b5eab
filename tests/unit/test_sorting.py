"""
Unit Tests for the sort stage.

Test Aspects Covered:
    ✅ Business Logic: Age and name ordering in both directions
    ✅ Edge Cases: Ties, empty input, no sort field
    ✅ Idempotency: Input list never modified
"""

from __future__ import annotations

from typing import List

from patient_directory.domain.entities import Patient, SortField, SortOrder
from patient_directory.pipeline.sorting import collation_key, compare_name, sort_patients
from tests.fixtures.patients import ages, ids, make_patient


def tied_ages() -> List[Patient]:
    """Ages [30, 25, 30, 40] with distinct ids."""
    return [
        make_patient(1, "First Thirty", 30),
        make_patient(2, "Twenty Five", 25),
        make_patient(3, "Second Thirty", 30),
        make_patient(4, "Forty", 40),
    ]


class TestSortByAge:
    """Test cases for numeric age ordering."""

    def test_ascending(self) -> None:
        result = sort_patients(tied_ages(), SortField.AGE, SortOrder.ASC)

        assert ages(result) == [25, 30, 30, 40]
        assert ids(result) == [2, 1, 3, 4]

    def test_descending_keeps_tie_order(self) -> None:
        """
        SCENARIO: sortBy=age, sortOrder=desc on ages [30, 25, 30, 40]
        EXPECTED: [40, 30 (first), 30 (second), 25]
        """
        # Act
        result = sort_patients(tied_ages(), SortField.AGE, SortOrder.DESC)

        # Assert
        assert ages(result) == [40, 30, 30, 25]
        assert ids(result) == [4, 1, 3, 2]

    def test_desc_is_not_reversed_asc(self) -> None:
        """
        SCENARIO: Compare desc output with reversed asc output
        EXPECTED: They differ exactly in the order of tied records
        """
        ascending = sort_patients(tied_ages(), SortField.AGE, SortOrder.ASC)
        descending = sort_patients(tied_ages(), SortField.AGE, SortOrder.DESC)

        assert ids(descending) != ids(list(reversed(ascending)))


class TestSortByName:
    """Test cases for name ordering."""

    def test_case_insensitive(self) -> None:
        """
        SCENARIO: Names with mixed leading case
        EXPECTED: Alphabetical order ignoring case
        """
        patients = [
            make_patient(1, "charlie"),
            make_patient(2, "Alice"),
            make_patient(3, "bob"),
        ]

        result = sort_patients(patients, SortField.PATIENT_NAME, SortOrder.ASC)

        assert [p.name for p in result] == ["Alice", "bob", "charlie"]

    def test_equal_names_keep_order_both_directions(self) -> None:
        patients = [
            make_patient(1, "Sam"),
            make_patient(2, "alex"),
            make_patient(3, "SAM"),
            make_patient(4, "sam"),
        ]

        ascending = sort_patients(patients, SortField.PATIENT_NAME, SortOrder.ASC)
        descending = sort_patients(patients, SortField.PATIENT_NAME, SortOrder.DESC)

        assert ids(ascending) == [2, 1, 3, 4]
        assert ids(descending) == [1, 3, 4, 2]

    def test_compare_name_ignores_case(self) -> None:
        assert compare_name(make_patient(1, "ADA"), make_patient(2, "ada")) == 0

    def test_accented_names_sort_with_base_letter(self) -> None:
        """
        SCENARIO: Names Zoe, Émile, Adam, émile (accented initials)
        EXPECTED: Accented E names sort among the E names, not after Z
        """
        patients = [
            make_patient(1, "Zoe"),
            make_patient(2, "Émile"),
            make_patient(3, "Adam"),
            make_patient(4, "Eve"),
        ]

        result = sort_patients(patients, SortField.PATIENT_NAME, SortOrder.ASC)

        assert [p.name for p in result] == ["Adam", "Émile", "Eve", "Zoe"]

    def test_collation_key_strips_accents_and_case(self) -> None:
        assert collation_key("Spärck")[0] == "sparck"
        assert collation_key("ÉMILE")[0] == collation_key("emile")[0]
        assert collation_key("émile") != collation_key("emile")


class TestNoSort:
    """Test cases for absent sort field."""

    def test_returns_source_order(self, sample_patients: List[Patient]) -> None:
        result = sort_patients(sample_patients, None, SortOrder.DESC)

        assert ids(result) == ids(sample_patients)
        assert result is not sample_patients

    def test_empty_input(self) -> None:
        assert sort_patients([], SortField.AGE, SortOrder.DESC) == []

    def test_input_not_modified(self, sample_patients: List[Patient]) -> None:
        original = ids(sample_patients)

        sort_patients(sample_patients, SortField.AGE, SortOrder.ASC)

        assert ids(sample_patients) == original
