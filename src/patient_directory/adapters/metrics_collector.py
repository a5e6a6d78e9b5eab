"""
In-Memory Metrics Collector.

Keeps every timing and count sample of the query pipeline in memory and
summarizes them per metric name or per tag value (e.g. per stage).
"""

from __future__ import annotations

from collections import defaultdict
from threading import Lock
from typing import Any, Dict, List, NamedTuple, Optional


class Sample(NamedTuple):
    kind: str
    value: float
    tags: Dict[str, str]


def _summarize(values: List[float]) -> Dict[str, float]:
    return {"count": len(values), "total": sum(values), "last": values[-1]}


class InMemoryMetricsCollector:
    """Thread-safe in-memory metrics store."""

    def __init__(self) -> None:
        self._samples: Dict[str, List[Sample]] = defaultdict(list)
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        with self._lock:
            self._samples[name].append(Sample("timing", duration_seconds, tags or {}))

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        with self._lock:
            self._samples[name].append(Sample("count", value, tags or {}))

    def get_metrics(self) -> Dict[str, Any]:
        """Per metric name: number of samples, their total and the last value."""
        with self._lock:
            return {
                name: _summarize([s.value for s in samples])
                for name, samples in self._samples.items()
                if samples
            }

    def get_metrics_by_tag(self, name: str, tag: str) -> Dict[str, Any]:
        """
        Summarize one metric grouped by a tag value.

        Example:
            >>> collector.get_metrics_by_tag("stage_duration_seconds", "stage")
            {'search_filter': {'count': 1, ...}, 'sort': {...}}
        """
        grouped: Dict[str, List[float]] = defaultdict(list)
        with self._lock:
            for sample in self._samples.get(name, []):
                if tag in sample.tags:
                    grouped[sample.tags[tag]].append(sample.value)
        return {value: _summarize(values) for value, values in grouped.items()}

    def clear(self) -> None:
        with self._lock:
            self._samples.clear()
