"""
Patient Query Pipeline - Main Orchestrator.

Runs one listing request through the fixed stage order:
    1. Validate request parameters (nothing runs if this fails)
    2. Load the patient snapshot from the provider
    3. Apply filter stages in sequence (AND across dimensions)
    4. Sort
    5. Paginate

Every stage returns a new list; the snapshot itself is never modified,
so one pipeline instance can serve concurrent requests.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence

from patient_directory.config.models import DirectoryConfig
from patient_directory.domain.entities import Patient, PatientPage, PatientQuery
from patient_directory.domain.value_objects import FilterResult
from patient_directory.filters import create_default_filters
from patient_directory.pipeline.pagination import paginate
from patient_directory.pipeline.sorting import sort_patients
from patient_directory.validation.request_validator import RequestValidator

logger = logging.getLogger(__name__)


class PatientProviderProtocol(Protocol):
    """Protocol for patient providers."""

    def get_patients(self) -> Sequence[Patient]:
        ...


class FilterStageProtocol(Protocol):
    """Protocol for filter stages."""

    @property
    def name(self) -> str:
        ...

    def is_active(self, query: PatientQuery) -> bool:
        ...

    def apply(self, patients: List[Patient], query: PatientQuery) -> FilterResult:
        ...


class AuditLoggerProtocol(Protocol):
    """Protocol for audit loggers."""

    def set_correlation_id(self, correlation_id: str) -> None:
        ...

    def log_stage_start(
        self, stage_name: str, input_count: int, metadata: Optional[Dict] = None
    ) -> None:
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict] = None,
    ) -> None:
        ...

    def log_anomaly(
        self, message: str, severity: str, context: Optional[Dict] = None
    ) -> None:
        ...


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_count(
        self, name: str, value: int, tags: Optional[Dict] = None
    ) -> None:
        ...

    def get_metrics(self) -> Dict[str, Any]:
        ...


def apply_filters(
    patients: Sequence[Patient],
    query: PatientQuery,
    filters: Optional[List[FilterStageProtocol]] = None,
) -> List[Patient]:
    """Run every filter stage in order and return the surviving patients."""
    current = list(patients)
    for stage in filters if filters is not None else create_default_filters():
        current = stage.apply(current, query).passed
    return current


class PatientQueryPipeline:
    """Main orchestrator for patient listing requests."""

    def __init__(
        self,
        provider: PatientProviderProtocol,
        config: Optional[DirectoryConfig] = None,
        filters: Optional[List[FilterStageProtocol]] = None,
        audit_logger: Optional[AuditLoggerProtocol] = None,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
        request_validator: Optional[RequestValidator] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            provider: Supplies the full patient collection
            config: Directory configuration
            filters: Ordered filter stages (defaults from config toggles)
            audit_logger: For audit trail (optional)
            metrics_collector: For timings and counts (optional)
            request_validator: Parses raw parameters (defaults from config)
        """
        self.provider = provider
        self.config = config or DirectoryConfig()
        self.filters = (
            filters if filters is not None else create_default_filters(self.config.filters)
        )
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector
        self.request_validator = request_validator or RequestValidator(self.config)

    def run(
        self,
        params: Mapping[str, str],
        correlation_id: Optional[str] = None,
    ) -> PatientPage:
        """
        Validate raw request parameters, then execute the query.

        Raises:
            ValidationError: If sort parameters are invalid (no data is loaded)
            DataLoadError: If the provider cannot supply the patients
        """
        correlation_id = correlation_id or str(uuid.uuid4())
        query = self.request_validator.parse(params, correlation_id=correlation_id)
        return self.execute(query)

    def execute(self, query: PatientQuery) -> PatientPage:
        """
        Execute a validated query.

        Args:
            query: Parsed query parameters

        Returns:
            PatientPage with the requested slice and metadata

        Raises:
            DataLoadError: If the provider cannot supply the patients
        """
        start_time = time.perf_counter()
        correlation_id = query.correlation_id or str(uuid.uuid4())
        if self.audit_logger:
            self.audit_logger.set_correlation_id(correlation_id)

        # 1. Load snapshot
        patients = self._load_patients()

        # 2. Filter
        current = list(patients)
        for stage in self.filters:
            current = self._execute_filter(stage, current, query)

        # 3. Sort
        current = self._execute_sort(current, query)

        # 4. Paginate
        pagination = self.config.pagination
        result = paginate(
            current,
            query.page,
            query.limit,
            min_limit=pagination.min_limit,
            max_limit=pagination.max_limit,
        )

        total_duration = time.perf_counter() - start_time
        if self.metrics_collector:
            self.metrics_collector.record_timing("query_total_seconds", total_duration)
            self.metrics_collector.record_count("result_total", result.meta.total)

        if result.meta.total and not result.data and self.audit_logger:
            self.audit_logger.log_anomaly(
                f"page {result.meta.page} is beyond last page {result.meta.total_pages}",
                severity="WARNING",
            )

        logger.debug(
            f"Query {correlation_id[:8]}: total={result.meta.total}, "
            f"page={result.meta.page}/{result.meta.total_pages} "
            f"({total_duration:.4f}s)"
        )
        return result

    def medical_issue_vocabulary(self) -> List[str]:
        """Sorted distinct medical issues present in the dataset."""
        return sorted({p.medical_issue for p in self._load_patients()})

    def _load_patients(self) -> Sequence[Patient]:
        load_start = time.perf_counter()
        patients = self.provider.get_patients()
        if self.metrics_collector:
            self.metrics_collector.record_timing(
                "data_load_seconds", time.perf_counter() - load_start
            )
        return patients

    def _execute_filter(
        self,
        stage: FilterStageProtocol,
        patients: List[Patient],
        query: PatientQuery,
    ) -> List[Patient]:
        if not stage.is_active(query):
            return patients

        stage_start = time.perf_counter()
        if self.audit_logger:
            self.audit_logger.log_stage_start(stage.name, len(patients))

        filter_result = stage.apply(patients, query)

        stage_duration = time.perf_counter() - stage_start
        if self.audit_logger:
            self.audit_logger.log_stage_end(
                stage.name, filter_result.passed_count, stage_duration
            )
        if self.metrics_collector:
            self.metrics_collector.record_timing(
                "stage_duration_seconds", stage_duration, {"stage": stage.name}
            )
            self.metrics_collector.record_count(
                "patients_filtered_total",
                filter_result.rejected_count,
                {"stage": stage.name},
            )

        return filter_result.passed

    def _execute_sort(self, patients: List[Patient], query: PatientQuery) -> List[Patient]:
        if query.sort_by is None:
            return patients

        stage_name = "sort"
        stage_start = time.perf_counter()
        if self.audit_logger:
            self.audit_logger.log_stage_start(
                stage_name, len(patients), {"sort_by": query.sort_by.value}
            )
        result = sort_patients(patients, query.sort_by, query.sort_order)
        stage_duration = time.perf_counter() - stage_start
        if self.audit_logger:
            self.audit_logger.log_stage_end(stage_name, len(result), stage_duration)
        if self.metrics_collector:
            self.metrics_collector.record_timing(
                "stage_duration_seconds", stage_duration, {"stage": stage_name}
            )
        return result
