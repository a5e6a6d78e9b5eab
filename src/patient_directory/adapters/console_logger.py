"""
Console Audit Logger.

Prints the audit trail of a listing request to stdout, one line per
stage, with how many patients each stage removed.

One instance can serve concurrent requests: the correlation id lives in
a context variable and stage input counts are keyed by request.
"""

from __future__ import annotations

from contextvars import ContextVar
from datetime import datetime
from threading import Lock
from typing import Any, Dict, Optional, Tuple

_current_request: ContextVar[Optional[str]] = ContextVar("console_request", default=None)


class ConsoleAuditLogger:
    """Console audit trail for patient queries."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Args:
            verbose: Print every stage; when False only anomalies are printed.
        """
        self._verbose = verbose
        self._stage_inputs: Dict[Tuple[Optional[str], str], int] = {}
        self._lock = Lock()

    def set_correlation_id(self, correlation_id: str) -> None:
        _current_request.set(correlation_id)

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        with self._lock:
            self._stage_inputs[(_current_request.get(), stage_name)] = input_count
        if self._verbose:
            details = "".join(f" {k}={v}" for k, v in (metadata or {}).items())
            self._print("INFO", f"{stage_name} <- {input_count} patients{details}")

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        with self._lock:
            input_count = self._stage_inputs.pop(
                (_current_request.get(), stage_name), output_count
            )
        if self._verbose:
            self._print(
                "INFO",
                f"{stage_name} -> {output_count} patients "
                f"({input_count - output_count} removed, {duration_seconds * 1000:.1f}ms)",
            )

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Anomalies are printed regardless of verbosity."""
        self._print(severity, f"ANOMALY: {message}")

    def _print(self, level: str, message: str) -> None:
        correlation_id = _current_request.get()
        request = correlation_id[:8] if correlation_id else "-" * 8
        print(f"{datetime.now():%H:%M:%S} {request} {level:<7} {message}")
