"""
In-Memory Patient Provider.

Serves a fixed patient collection held in memory. Used by tests and for
embedding the directory in other programs.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple

from patient_directory.adapters.json_provider import parse_patients
from patient_directory.domain.entities import Patient
from patient_directory.validation.data_validator import DataValidator


class InMemoryPatientProvider:
    """Fixed, read-only patient collection."""

    def __init__(self, patients: Iterable[Patient]) -> None:
        self._patients: Tuple[Patient, ...] = tuple(patients)

    @classmethod
    def from_records(
        cls,
        records: List[Any],
        data_validator: Optional[DataValidator] = None,
    ) -> "InMemoryPatientProvider":
        """Build from raw dataset records (same rules as the JSON provider)."""
        return cls(parse_patients(records, data_validator))

    def get_patients(self) -> Tuple[Patient, ...]:
        return self._patients
