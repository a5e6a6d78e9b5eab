"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe the outcome of a
pipeline step but have no conceptual identity.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from patient_directory.domain.entities import Patient


# Rejection reasons: patient id -> reason string
RejectionReasonsDict = Dict[int, str]


class FilterResult(BaseModel):
    """Result of applying a single filter stage."""

    passed: List[Patient] = Field(
        default_factory=list, description="Patients that passed, in input order"
    )
    rejection_reasons: RejectionReasonsDict = Field(
        default_factory=dict, description="Patient id -> rejection reason"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def passed_count(self) -> int:
        return len(self.passed)

    @property
    def rejected_count(self) -> int:
        return len(self.rejection_reasons)
