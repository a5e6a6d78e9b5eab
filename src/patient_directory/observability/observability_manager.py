"""
Observability Manager - Structured Audit Logging via structlog.

Renders the pipeline's audit trail as structured events (JSON lines or
console output). The correlation id of the current request is bound
with ``structlog.contextvars`` and attached to every event, so the
events of concurrent requests stay apart.

A bounded history of recent events is kept for inspection.
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections import deque
from typing import Any, Deque, Dict, List, Optional

import structlog

MAX_EVENTS = 1000

_LEVELS = {"DEBUG": "debug", "INFO": "info", "WARNING": "warning", "ERROR": "error"}


def get_correlation_id() -> Optional[str]:
    """Correlation id bound to the current context, if any."""
    return structlog.contextvars.get_contextvars().get("correlation_id")


def set_correlation_id(correlation_id: str) -> None:
    """Bind a correlation id to the current context, dropping older bindings."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


class ObservabilityManager:
    """
    structlog-backed audit logger for patient queries.

    Implements ``set_correlation_id``, ``log_stage_start``,
    ``log_stage_end`` and ``log_anomaly`` so it can be handed to the
    query pipeline directly.
    """

    def __init__(
        self,
        service_name: str = "patient_directory",
        use_json: bool = True,
        log_level: int = logging.INFO,
    ) -> None:
        """
        Args:
            service_name: Added to every event as "service"
            use_json: JSON lines when True, human readable console otherwise
            log_level: Minimum level that is rendered
        """
        self.service_name = service_name
        self.use_json = use_json
        self.log_level = log_level
        self._history: Deque[Dict[str, Any]] = deque(maxlen=MAX_EVENTS)
        self._stage_inputs: Dict[tuple, int] = {}
        self._lock = threading.Lock()

        renderer = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer()
        )
        # Processors and level belong to this instance; global structlog
        # configuration is left untouched. The print logger itself comes
        # from the configured factory on every call.
        self._logger = structlog.wrap_logger(
            None,
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            cache_logger_on_first_use=False,
            service=service_name,
        )

    def set_correlation_id(self, correlation_id: str) -> None:
        set_correlation_id(correlation_id)

    def generate_correlation_id(self) -> str:
        """Bind and return a fresh uuid4 correlation id."""
        correlation_id = str(uuid.uuid4())
        set_correlation_id(correlation_id)
        return correlation_id

    def log_event(
        self,
        event_type: str,
        data: Optional[Dict[str, Any]] = None,
        level: str = "info",
    ) -> None:
        """
        Record an event in the history and render it.

        Args:
            event_type: Event name, e.g. "stage_end" or "anomaly"
            data: Event fields
            level: debug, info, warning or error
        """
        fields = dict(data or {})
        with self._lock:
            self._history.append(
                {"event_type": event_type, "correlation_id": get_correlation_id(), **fields}
            )
        getattr(self._logger, level, self._logger.info)(event_type, **fields)

    def get_events(
        self,
        correlation_id: Optional[str] = None,
        event_type: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Recorded events, oldest first, optionally narrowed to one request or type."""
        with self._lock:
            events = list(self._history)
        return [
            e
            for e in events
            if (correlation_id is None or e["correlation_id"] == correlation_id)
            and (event_type is None or e["event_type"] == event_type)
        ]

    def clear(self) -> None:
        with self._lock:
            self._history.clear()
            self._stage_inputs.clear()

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        with self._lock:
            self._stage_inputs[(get_correlation_id(), stage_name)] = input_count
        self.log_event(
            "stage_start",
            {"stage": stage_name, "input_count": input_count, **(metadata or {})},
            level="debug",
        )

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        with self._lock:
            input_count = self._stage_inputs.pop(
                (get_correlation_id(), stage_name), output_count
            )
        self.log_event(
            "stage_end",
            {
                "stage": stage_name,
                "output_count": output_count,
                "removed_count": input_count - output_count,
                "duration_ms": round(duration_seconds * 1000, 3),
                **(metadata or {}),
            },
        )

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        level = _LEVELS.get(severity.upper(), "error")
        self.log_event("anomaly", {"message": message, **(context or {})}, level=level)
