"""
Paginate Stage.

Slices an ordered patient list into one page and computes page metadata.
Pages past the end are not an error: they come back empty with the same
total and limit.
"""

from __future__ import annotations

import math
from typing import List

from patient_directory.domain.entities import PageMeta, Patient, PatientPage

MIN_LIMIT = 1
MAX_LIMIT = 100

# Ellipsis markers used by visible_page_numbers
GAP_BEFORE = -1
GAP_AFTER = -2


def clamp_page(page: int) -> int:
    return max(1, page)


def clamp_limit(limit: int, min_limit: int = MIN_LIMIT, max_limit: int = MAX_LIMIT) -> int:
    return min(max_limit, max(min_limit, limit))


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` items; 0 when there are none."""
    return math.ceil(total / limit)


def paginate(
    patients: List[Patient],
    page: int,
    limit: int,
    min_limit: int = MIN_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> PatientPage:
    """
    Return the ``page``-th slice of ``patients`` with metadata.

    ``page`` is clamped to at least 1 and ``limit`` into
    ``[min_limit, max_limit]`` before anything is computed.
    """
    page = clamp_page(page)
    limit = clamp_limit(limit, min_limit, max_limit)

    total = len(patients)
    offset = (page - 1) * limit

    return PatientPage(
        data=list(patients[offset : offset + limit]),
        meta=PageMeta(
            total=total,
            page=page,
            limit=limit,
            total_pages=total_pages(total, limit),
        ),
    )


def visible_page_numbers(
    current_page: int,
    page_count: int,
    max_visible: int = 7,
) -> List[int]:
    """
    Page numbers to render in a pagination control.

    Small page counts are listed in full. Otherwise the first and last
    page are always shown, together with the current page and its direct
    neighbours; ``GAP_BEFORE`` / ``GAP_AFTER`` mark the elided runs.

    Example:
        >>> visible_page_numbers(5, 10)
        [1, -1, 4, 5, 6, -2, 10]
    """
    if page_count <= max_visible:
        return list(range(1, page_count + 1))

    pages = [1]
    if current_page > 3:
        pages.append(GAP_BEFORE)

    start = max(2, current_page - 1)
    end = min(page_count - 1, current_page + 1)
    pages.extend(range(start, end + 1))

    if current_page < page_count - 2:
        pages.append(GAP_AFTER)

    if page_count > 1:
        pages.append(page_count)

    return pages
