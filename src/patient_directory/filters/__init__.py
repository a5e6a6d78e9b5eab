"""
Filters Package - Concrete Filter Implementations.

Each filter implements the same stage protocol (``name``, ``is_active``,
``apply``) and narrows the patient list by one query dimension. The
pipeline runs them in sequence, which gives AND semantics across
dimensions.

Filters:
    - SearchFilter: Case-insensitive substring on name or medical issue
    - AgeRangeFilter: Inclusive age bounds
    - MedicalIssueFilter: Medical issue set membership

Design Principles:
    - Each filter is independently testable
    - Stateless and pure: input order preserved, records never modified
    - Inactive filters pass everything through
    - Clear rejection reasons for audit trail
"""

from typing import List

from patient_directory.config.models import FilterToggleConfig
from patient_directory.filters.age_range import AgeRangeFilter
from patient_directory.filters.medical_issue import MedicalIssueFilter
from patient_directory.filters.search import SearchFilter


def create_default_filters(config: FilterToggleConfig = None) -> List:
    """Build the filter stages in pipeline order."""
    config = config or FilterToggleConfig()
    return [
        SearchFilter(enabled=config.search),
        AgeRangeFilter(enabled=config.age_range),
        MedicalIssueFilter(enabled=config.medical_issue),
    ]


__all__ = [
    "SearchFilter",
    "AgeRangeFilter",
    "MedicalIssueFilter",
    "create_default_filters",
]
