"""
Age Range Filter Implementation.

Inclusive lower and upper age bounds, each independently optional. No
relation between the bounds is enforced: a minimum above the maximum
simply matches nothing.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from patient_directory.domain.entities import Patient, PatientQuery
from patient_directory.domain.value_objects import FilterResult


class AgeRangeFilter:
    """Filter patients by age bounds."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "age_range_filter"

    def is_active(self, query: PatientQuery) -> bool:
        return self.enabled and (query.age_min is not None or query.age_max is not None)

    def apply(self, patients: List[Patient], query: PatientQuery) -> FilterResult:
        """
        Keep patients with ``age_min <= age <= age_max``.

        Args:
            patients: Patients to filter, in source order
            query: Parsed query (unset bounds are ignored)

        Returns:
            FilterResult with passed patients in input order
        """
        if not self.is_active(query):
            return FilterResult(passed=list(patients))

        passed: List[Patient] = []
        reasons: Dict[int, str] = {}

        for patient in patients:
            reason = self._check_age(patient.age, query.age_min, query.age_max)
            if reason is None:
                passed.append(patient)
            else:
                reasons[patient.id] = reason

        return FilterResult(passed=passed, rejection_reasons=reasons)

    @staticmethod
    def _check_age(
        age: int, age_min: Optional[int], age_max: Optional[int]
    ) -> Optional[str]:
        if age_min is not None and age < age_min:
            return f"age={age} < min={age_min}"
        if age_max is not None and age > age_max:
            return f"age={age} > max={age_max}"
        return None
