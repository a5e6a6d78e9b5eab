"""
Search Filter Implementation.

Free-text search over patient name and medical issue. Matching is a
case-insensitive substring test; a record passes if either field
contains the search term.
"""

from __future__ import annotations

from typing import Dict, List

from patient_directory.domain.entities import Patient, PatientQuery
from patient_directory.domain.value_objects import FilterResult


class SearchFilter:
    """Filter patients by free-text search term."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "search_filter"

    def is_active(self, query: PatientQuery) -> bool:
        return self.enabled and bool(query.search)

    def apply(self, patients: List[Patient], query: PatientQuery) -> FilterResult:
        """
        Keep patients whose name or medical issue contains ``query.search``.

        An absent or empty search term matches everything.
        """
        if not self.is_active(query):
            return FilterResult(passed=list(patients))

        term = query.search.casefold()
        passed: List[Patient] = []
        reasons: Dict[int, str] = {}

        for patient in patients:
            if term in patient.name.casefold() or term in patient.medical_issue.casefold():
                passed.append(patient)
            else:
                reasons[patient.id] = f"no match for search={query.search!r}"

        return FilterResult(passed=passed, rejection_reasons=reasons)
