"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from typing import List

import pytest

from patient_directory.adapters.console_logger import ConsoleAuditLogger
from patient_directory.adapters.memory_provider import InMemoryPatientProvider
from patient_directory.adapters.metrics_collector import InMemoryMetricsCollector
from patient_directory.config.models import DirectoryConfig
from patient_directory.domain.entities import Patient
from tests.fixtures.patients import make_patient


@pytest.fixture
def sample_patients() -> List[Patient]:
    """Small collection covering every filter dimension."""
    return [
        make_patient(1, "Ada Lovelace", 36, "fever"),
        make_patient(2, "alan Turing", 41, "headache"),
        make_patient(3, "Grace Hopper", 79, "rash"),
        make_patient(4, "Katherine Johnson", 25, "sore throat", with_contact=False),
        make_patient(5, "Edsger Dijkstra", 72, "back_pain"),
        make_patient(6, "Barbara Liskov", 30, "Fever"),
        make_patient(7, "Donald Knuth", 64, "sinusitis"),
        make_patient(8, "Margaret Hamilton", 18, "rash"),
    ]


@pytest.fixture
def provider(sample_patients: List[Patient]) -> InMemoryPatientProvider:
    """In-memory provider over the sample patients."""
    return InMemoryPatientProvider(sample_patients)


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def default_config() -> DirectoryConfig:
    """Create default directory configuration."""
    return DirectoryConfig()
