"""
Core Domain Entities.

This module defines the fundamental entities of the Patient Directory domain.
These entities represent the core concepts that the query pipeline operates on.

Serialized field names follow the bundled dataset (``patient_id``,
``patient_name``, ``medical_issue``, ...), so API responses keep the shape
the browser UI already expects.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SortField(str, Enum):
    """Fields a patient listing can be sorted by."""

    AGE = "age"
    PATIENT_NAME = "patient_name"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class ContactInfo(BaseModel):
    """Contact details attached to a patient."""

    address: Optional[str] = Field(default=None, description="Postal address")
    number: Optional[str] = Field(default=None, description="Phone number")
    email: Optional[str] = Field(default=None, description="Email address")

    model_config = ConfigDict(frozen=True)


class Patient(BaseModel):
    """A single patient record from the dataset."""

    id: int = Field(..., alias="patient_id", description="Unique identifier")
    name: str = Field(..., alias="patient_name", min_length=1)
    age: int = Field(..., ge=0)
    medical_issue: str = Field(..., description="Normalized medical issue")
    photo_url: Optional[str] = Field(default=None)
    contact: Tuple[ContactInfo, ...] = Field(default_factory=tuple, max_length=1)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("medical_issue")
    @classmethod
    def _normalize_issue(cls, value: str) -> str:
        return value.strip().lower()

    @property
    def primary_contact(self) -> Optional[ContactInfo]:
        """First contact entry, or None when the record has no contact info."""
        return self.contact[0] if self.contact else None

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Patient):
            return NotImplemented
        return self.id == other.id


class PatientQuery(BaseModel):
    """Parsed, validated query parameters for one listing request."""

    search: Optional[str] = None
    age_min: Optional[int] = None
    age_max: Optional[int] = None
    medical_issues: frozenset[str] = Field(default_factory=frozenset)
    sort_by: Optional[SortField] = None
    sort_order: SortOrder = SortOrder.ASC
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)
    correlation_id: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class PageMeta(BaseModel):
    """Pagination metadata returned next to a page of patients."""

    total: int = Field(..., ge=0, description="Matches before pagination")
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0, serialization_alias="totalPages")

    model_config = ConfigDict(frozen=True)


class PatientPage(BaseModel):
    """Result envelope: one page of patients plus metadata."""

    data: List[Patient] = Field(default_factory=list)
    meta: PageMeta

    def to_response(self) -> dict:
        """Serialize using the wire field names (``patient_id``, ``totalPages``)."""
        return self.model_dump(mode="json", by_alias=True)
