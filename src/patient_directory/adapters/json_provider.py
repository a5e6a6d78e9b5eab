"""
JSON Patient Provider.

Loads the patient dataset from a JSON file exactly once and serves the
same immutable snapshot to every request afterwards.

Design Notes:
    - Lazy: nothing is read until the first request
    - Initialization-once under a lock; reads after that are lock-free
    - A failed load is not cached, the next request tries again
    - Any failure surfaces as DataLoadError, never as partial data
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from patient_directory.domain.entities import Patient
from patient_directory.validation.data_validator import DataValidator

logger = logging.getLogger(__name__)

BUNDLED_DATASET = "patients.json"


class DataLoadError(Exception):
    """Raised when the patient dataset cannot be loaded."""


def normalize_record(record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map a raw dataset record onto the Patient field names.

    Accepts both the nested dataset shape (``patient_id``,
    ``contact: [{address, number, email}]``) and the flat legacy shape
    (``id``, ``email``, ``contact_number``). Anything that is not a list
    of contacts becomes an empty contact list.
    """
    contact = record.get("contact")
    if isinstance(contact, list):
        contacts = [c for c in contact if isinstance(c, dict)]
    elif "email" in record or "contact_number" in record:
        contacts = [
            {
                "address": record.get("address"),
                "number": record.get("contact_number"),
                "email": record.get("email"),
            }
        ]
    else:
        contacts = []

    if len(contacts) > 1:
        logger.warning(
            f"patient_id={record.get('patient_id', record.get('id'))}: "
            f"{len(contacts)} contact entries, keeping the first"
        )
        contacts = contacts[:1]

    return {
        "patient_id": record.get("patient_id", record.get("id")),
        "patient_name": record.get("patient_name"),
        "age": record.get("age"),
        "medical_issue": record.get("medical_issue"),
        "photo_url": record.get("photo_url") or None,
        "contact": contacts,
    }


def parse_patients(
    records: Any,
    data_validator: Optional[DataValidator] = None,
) -> Tuple[Patient, ...]:
    """
    Turn decoded JSON into a validated patient snapshot.

    Raises:
        DataLoadError: If the payload or any record is invalid
    """
    validator = data_validator or DataValidator()

    if not isinstance(records, list):
        raise DataLoadError("Patient dataset must be a JSON array")

    problems: List[str] = []
    for index, record in enumerate(records):
        problems.extend(validator.validate_raw_record(record, index))
    if problems:
        raise DataLoadError("; ".join(problems))

    try:
        patients = [Patient.model_validate(normalize_record(r)) for r in records]
    except PydanticValidationError as e:
        raise DataLoadError(f"Invalid patient record: {e}") from e

    result = validator.validate_patients(patients)
    if not result.is_valid:
        raise DataLoadError("; ".join(result.errors))

    return tuple(patients)


class JsonPatientProvider:
    """Serves a load-once, read-only snapshot of a JSON patient dataset."""

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        encoding: str = "utf-8",
        data_validator: Optional[DataValidator] = None,
    ) -> None:
        """
        Initialize provider.

        Args:
            path: JSON file to read; None uses the bundled dataset
            encoding: File encoding
            data_validator: Dataset checks applied after parsing
        """
        self.path = Path(path) if path is not None else None
        self.encoding = encoding
        self.data_validator = data_validator or DataValidator()
        self._patients: Optional[Tuple[Patient, ...]] = None
        self._lock = Lock()

    @property
    def is_loaded(self) -> bool:
        return self._patients is not None

    def get_patients(self) -> Tuple[Patient, ...]:
        """
        Return the full patient collection, loading it on first use.

        Raises:
            DataLoadError: If the dataset cannot be read or is invalid
        """
        if self._patients is not None:
            return self._patients

        with self._lock:
            if self._patients is None:
                self._patients = self._load()
                logger.info(f"Loaded {len(self._patients)} patients from {self._source_name()}")
        return self._patients

    def _load(self) -> Tuple[Patient, ...]:
        try:
            raw = self._read_text()
            records = json.loads(raw)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading patients data from {self._source_name()}: {e}")
            raise DataLoadError("Failed to load patients data") from e

        try:
            return parse_patients(records, self.data_validator)
        except DataLoadError as e:
            logger.error(f"Invalid patients data in {self._source_name()}: {e}")
            raise

    def _read_text(self) -> str:
        if self.path is not None:
            return self.path.read_text(encoding=self.encoding)
        dataset = resources.files("patient_directory") / "data" / BUNDLED_DATASET
        return dataset.read_text(encoding=self.encoding)

    def _source_name(self) -> str:
        return str(self.path) if self.path is not None else f"bundled {BUNDLED_DATASET}"
