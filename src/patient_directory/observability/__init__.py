"""
Observability Package - Structured Logging and Tracing.

Components:
    - ObservabilityManager: structlog-based audit logger with correlation IDs
    - get_correlation_id / set_correlation_id: context-local request IDs
"""

from patient_directory.observability.observability_manager import (
    ObservabilityManager,
    get_correlation_id,
    set_correlation_id,
)

__all__ = [
    "ObservabilityManager",
    "get_correlation_id",
    "set_correlation_id",
]
