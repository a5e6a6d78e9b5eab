"""
Unit Tests for AgeRangeFilter.

Test Aspects Covered:
    ✅ Business Logic: Inclusive bounds, each optional
    ✅ Edge Cases: Inverted bounds, exact boundary ages
"""

from __future__ import annotations

from typing import List

import pytest

from patient_directory.domain.entities import Patient
from patient_directory.filters.age_range import AgeRangeFilter
from tests.fixtures.patients import ages, make_query


@pytest.fixture
def age_filter() -> AgeRangeFilter:
    """Create filter instance."""
    return AgeRangeFilter()


class TestAgeRangeFilter:
    """Test cases for AgeRangeFilter."""

    def test_min_only(self, age_filter: AgeRangeFilter, sample_patients: List[Patient]) -> None:
        """
        SCENARIO: Only a lower bound
        EXPECTED: Ages >= bound pass, input order kept
        """
        result = age_filter.apply(sample_patients, make_query(age_min=60))

        assert ages(result.passed) == [79, 72, 64]

    def test_max_only(self, age_filter: AgeRangeFilter, sample_patients: List[Patient]) -> None:
        result = age_filter.apply(sample_patients, make_query(age_max=30))

        assert ages(result.passed) == [25, 30, 18]

    def test_bounds_are_inclusive(
        self,
        age_filter: AgeRangeFilter,
        sample_patients: List[Patient],
    ) -> None:
        """
        SCENARIO: Bounds equal to existing ages
        EXPECTED: Patients exactly on the bounds pass
        """
        result = age_filter.apply(sample_patients, make_query(age_min=30, age_max=41))

        assert ages(result.passed) == [36, 41, 30]

    def test_inverted_bounds_match_nothing(
        self,
        age_filter: AgeRangeFilter,
        sample_patients: List[Patient],
    ) -> None:
        """
        SCENARIO: age_min=30, age_max=20
        EXPECTED: Empty result, no error
        """
        result = age_filter.apply(sample_patients, make_query(age_min=30, age_max=20))

        assert result.passed == []

    def test_no_bounds_is_noop(
        self,
        age_filter: AgeRangeFilter,
        sample_patients: List[Patient],
    ) -> None:
        result = age_filter.apply(sample_patients, make_query())

        assert len(result.passed) == len(sample_patients)
        assert not age_filter.is_active(make_query())

    def test_rejection_reason_names_bound(
        self,
        age_filter: AgeRangeFilter,
        sample_patients: List[Patient],
    ) -> None:
        result = age_filter.apply(sample_patients, make_query(age_min=50))

        assert result.rejection_reasons[1] == "age=36 < min=50"
