"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the ports the query pipeline depends on,
following the Hexagonal Architecture (Ports & Adapters) pattern.

Providers:
    - JsonPatientProvider: Load-once snapshot of a JSON dataset
    - InMemoryPatientProvider: Fixed in-memory collection

Loggers:
    - ConsoleAuditLogger: Simple console output

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from patient_directory.adapters.console_logger import ConsoleAuditLogger
from patient_directory.adapters.json_provider import (
    DataLoadError,
    JsonPatientProvider,
    normalize_record,
    parse_patients,
)
from patient_directory.adapters.memory_provider import InMemoryPatientProvider
from patient_directory.adapters.metrics_collector import InMemoryMetricsCollector

__all__ = [
    "ConsoleAuditLogger",
    "DataLoadError",
    "JsonPatientProvider",
    "normalize_record",
    "parse_patients",
    "InMemoryPatientProvider",
    "InMemoryMetricsCollector",
]
