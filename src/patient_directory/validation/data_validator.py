"""
Data Validator - Validate the Loaded Dataset.

Validates the patient snapshot once, right after loading:
    - Patient ids are unique across the collection
    - Names are not blank
    - Raw records carry the fields the directory relies on
    - Unknown raw fields are reported (warning only)

Design Notes:
    - Errors make the load fail (no partial datasets)
    - Warnings are logged and the load continues
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List

from patient_directory.domain.entities import Patient

logger = logging.getLogger(__name__)

REQUIRED_RAW_FIELDS = ("age", "medical_issue")
KNOWN_RAW_FIELDS = frozenset(
    {
        "patient_id", "id", "patient_name", "age", "medical_issue",
        "photo_url", "contact", "email", "contact_number", "address",
    }
)


@dataclass
class ValidationResult:
    """Result of data validation."""

    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, error: str) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning (validation still passes)."""
        self.warnings.append(warning)

    @property
    def has_issues(self) -> bool:
        return len(self.errors) > 0 or len(self.warnings) > 0


class DataValidator:
    """Checks dataset integrity for the patient snapshot."""

    def validate_raw_record(self, record: Any, index: int) -> List[str]:
        """
        Check a raw JSON record before it is turned into a Patient.

        Returns:
            List of problems; empty when the record looks usable
        """
        if not isinstance(record, dict):
            return [f"record[{index}]: expected an object, got {type(record).__name__}"]

        problems: List[str] = []
        if "patient_id" not in record and "id" not in record:
            problems.append(f"record[{index}]: missing patient_id")
        if "patient_name" not in record:
            problems.append(f"record[{index}]: missing patient_name")
        for name in REQUIRED_RAW_FIELDS:
            if name not in record:
                problems.append(f"record[{index}]: missing {name}")

        unknown = sorted(set(record) - KNOWN_RAW_FIELDS)
        if unknown:
            logger.warning(f"record[{index}]: ignoring unknown fields {unknown}")
        return problems

    def validate_patients(self, patients: List[Patient]) -> ValidationResult:
        """
        Validate the collection as a whole.

        Args:
            patients: Parsed patients in load order

        Returns:
            ValidationResult with errors and warnings
        """
        result = ValidationResult()

        counts: Dict[int, int] = Counter(p.id for p in patients)
        for patient_id, count in sorted(counts.items()):
            if count > 1:
                result.add_error(f"patient_id={patient_id} appears {count} times")

        for patient in patients:
            if not patient.name.strip():
                result.add_warning(f"patient_id={patient.id}: blank patient_name")

        if result.has_issues:
            logger.warning(
                f"Dataset validation: {len(result.errors)} errors, "
                f"{len(result.warnings)} warnings"
            )
        return result
