"""
Sort Stage.

Orders a filtered patient list by one field. Ordering is stable: records
that compare equal keep their relative input order in both directions,
because descending order negates the comparison instead of reversing the
sorted output.
"""

from __future__ import annotations

import unicodedata
from functools import cmp_to_key
from typing import Callable, Dict, List, Optional, Tuple

from patient_directory.domain.entities import Patient, SortField, SortOrder

Comparator = Callable[[Patient, Patient], int]


def compare_age(a: Patient, b: Patient) -> int:
    return (a.age > b.age) - (a.age < b.age)


def collation_key(name: str) -> Tuple[str, str]:
    """
    Case-insensitive, accent-aware sort key that does not depend on the
    process locale.

    Primary key: casefolded name with combining marks removed, so "Émile"
    sorts among the E names. Secondary key: the casefolded name, so
    accented and plain spellings still order deterministically.
    """
    folded = unicodedata.normalize("NFKD", name.casefold())
    base = "".join(ch for ch in folded if not unicodedata.combining(ch))
    return base, folded


def compare_name(a: Patient, b: Patient) -> int:
    """Case-insensitive, accent-aware name comparison."""
    key_a, key_b = collation_key(a.name), collation_key(b.name)
    return (key_a > key_b) - (key_a < key_b)


COMPARATORS: Dict[SortField, Comparator] = {
    SortField.AGE: compare_age,
    SortField.PATIENT_NAME: compare_name,
}


def _descending(compare: Comparator) -> Comparator:
    return lambda a, b: -compare(a, b)


def sort_patients(
    patients: List[Patient],
    sort_by: Optional[SortField] = None,
    sort_order: SortOrder = SortOrder.ASC,
) -> List[Patient]:
    """
    Return a new list ordered by ``sort_by``.

    Args:
        patients: Filtered patients in source order
        sort_by: Field to sort by; None keeps source order
        sort_order: Direction of the comparison

    Returns:
        New list; the input list is not modified
    """
    if sort_by is None:
        return list(patients)

    compare = COMPARATORS[sort_by]
    if sort_order == SortOrder.DESC:
        compare = _descending(compare)

    return sorted(patients, key=cmp_to_key(compare))
