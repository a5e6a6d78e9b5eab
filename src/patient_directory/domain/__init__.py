"""
Domain Layer - Core Entities and Value Objects.

Entities:
    - Patient / ContactInfo: Immutable dataset records
    - PatientQuery: Parsed request parameters
    - PatientPage / PageMeta: Result envelope

Value Objects:
    - FilterResult: Outcome of one filter stage
"""

from patient_directory.domain.entities import (
    ContactInfo,
    PageMeta,
    Patient,
    PatientPage,
    PatientQuery,
    SortField,
    SortOrder,
)
from patient_directory.domain.value_objects import FilterResult

__all__ = [
    "ContactInfo",
    "PageMeta",
    "Patient",
    "PatientPage",
    "PatientQuery",
    "SortField",
    "SortOrder",
    "FilterResult",
]
