"""
Validation Package - Input and Data Validation.

This package provides validation for:
    - RequestValidator: Parse and validate listing requests
    - DataValidator: Validate the loaded patient dataset

Design Principles:
    - Fail fast on invalid sort parameters
    - Lenient on malformed numeric filters
    - Clear, actionable error messages
"""

from patient_directory.validation.data_validator import (
    DataValidator,
    ValidationResult,
)
from patient_directory.validation.request_validator import (
    RequestValidator,
    ValidationError,
    parse_int,
    parse_medical_issues,
)

__all__ = [
    "DataValidator",
    "ValidationResult",
    "RequestValidator",
    "ValidationError",
    "parse_int",
    "parse_medical_issues",
]
