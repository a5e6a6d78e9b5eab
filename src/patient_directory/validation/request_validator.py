"""
Request Validator - Parse and Validate Listing Requests.

Turns raw query-string parameters into a PatientQuery before any data is
touched:
    - sortBy must be one of the configured sortable fields
    - sortOrder must be asc or desc
    - ageMin / ageMax use their leading integer; values without one are ignored
    - medical_issue is split on commas, trimmed and lower-cased
    - page / limit are clamped into range

Design Notes:
    - Fail-fast: only sort parameters can be rejected
    - Clear error messages naming the field and its allowed values
    - Lenient numeric parsing everywhere else
"""

from __future__ import annotations

import logging
import re
from typing import List, Mapping, Optional

from patient_directory.config.models import DirectoryConfig
from patient_directory.domain.entities import PatientQuery, SortField, SortOrder
from patient_directory.pipeline.pagination import clamp_limit, clamp_page

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class ValidationError(Exception):
    """Raised when request validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        allowed: Optional[List[str]] = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
        self.allowed = allowed or []


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Read the leading integer of a parameter.

    "30abc" gives 30 and "40.5" gives 40; None is returned when the value
    is absent or does not start with digits ("abc", "", ".5").
    """
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def parse_medical_issues(value: Optional[str]) -> frozenset:
    """Split a comma-separated issue list into a normalized set."""
    if not value:
        return frozenset()
    issues = (part.strip().lower() for part in value.split(","))
    return frozenset(issue for issue in issues if issue)


class RequestValidator:
    """
    Validates listing requests before processing.

    Validates:
        - sortBy is a supported field
        - sortOrder is asc or desc
    Normalizes:
        - age bounds, medical issues, page and limit
    """

    def __init__(self, config: Optional[DirectoryConfig] = None) -> None:
        """
        Initialize request validator.

        Args:
            config: Directory configuration (defaults to built-in defaults)
        """
        self.config = config or DirectoryConfig()
        self.allowed_sort_fields = [
            f for f in self.config.sorting.allowed_fields
            if f in {field.value for field in SortField}
        ]
        self.allowed_sort_orders = [order.value for order in SortOrder]

    def parse(
        self,
        params: Mapping[str, str],
        correlation_id: Optional[str] = None,
    ) -> PatientQuery:
        """
        Build a PatientQuery from raw request parameters.

        Args:
            params: Query-string parameters (``search``, ``ageMin``, ...)
            correlation_id: Optional request identifier to carry along

        Returns:
            Validated PatientQuery

        Raises:
            ValidationError: If sortBy or sortOrder is invalid
        """
        sort_by = self._validate_sort_by(params.get("sortBy") or "")
        sort_order = self._validate_sort_order(params.get("sortOrder") or "asc")

        pagination = self.config.pagination
        page = parse_int(params.get("page"))
        limit = parse_int(params.get("limit"))

        query = PatientQuery(
            search=params.get("search") or None,
            age_min=parse_int(params.get("ageMin")),
            age_max=parse_int(params.get("ageMax")),
            medical_issues=parse_medical_issues(params.get("medical_issue")),
            sort_by=sort_by,
            sort_order=sort_order,
            page=clamp_page(pagination.default_page if page is None else page),
            limit=clamp_limit(
                pagination.default_limit if limit is None else limit,
                pagination.min_limit,
                pagination.max_limit,
            ),
            correlation_id=correlation_id,
        )

        logger.debug(
            f"Request validated: sort_by={query.sort_by}, "
            f"sort_order={query.sort_order.value}, page={query.page}, limit={query.limit}"
        )
        return query

    def _validate_sort_by(self, value: str) -> Optional[SortField]:
        if not value:
            return None
        if value not in self.allowed_sort_fields:
            message = (
                f"Invalid sortBy field. Must be one of: "
                f"{', '.join(self.allowed_sort_fields)}"
            )
            logger.warning(f"Request validation failed: {message} (got {value!r})")
            raise ValidationError(message, field="sortBy", allowed=self.allowed_sort_fields)
        return SortField(value)

    def _validate_sort_order(self, value: str) -> SortOrder:
        if value not in self.allowed_sort_orders:
            message = (
                f"Invalid sortOrder. Must be one of: "
                f"{', '.join(self.allowed_sort_orders)}"
            )
            logger.warning(f"Request validation failed: {message} (got {value!r})")
            raise ValidationError(message, field="sortOrder", allowed=self.allowed_sort_orders)
        return SortOrder(value)
