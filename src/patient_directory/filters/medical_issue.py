"""
Medical Issue Filter Implementation.

Set membership over the normalized medical issue. Issues in the query
are OR'd together; the vocabulary is open, so unknown values are simply
compared like any other.
"""

from __future__ import annotations

from typing import Dict, List

from patient_directory.domain.entities import Patient, PatientQuery
from patient_directory.domain.value_objects import FilterResult


class MedicalIssueFilter:
    """Filter patients by medical issue membership."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "medical_issue_filter"

    def is_active(self, query: PatientQuery) -> bool:
        return self.enabled and bool(query.medical_issues)

    def apply(self, patients: List[Patient], query: PatientQuery) -> FilterResult:
        if not self.is_active(query):
            return FilterResult(passed=list(patients))

        wanted = {issue.casefold() for issue in query.medical_issues}
        passed: List[Patient] = []
        reasons: Dict[int, str] = {}

        for patient in patients:
            if patient.medical_issue.casefold() in wanted:
                passed.append(patient)
            else:
                reasons[patient.id] = f"medical_issue={patient.medical_issue} not requested"

        return FilterResult(passed=passed, rejection_reasons=reasons)
