"""
In-Memory Metrics Collector.

Keeps every timing and count recorded by listing calls and summarises
them per metric name.
"""

from __future__ import annotations

from threading import Lock
from typing import Any, Dict, List, Optional, Tuple

# (value, tags)
_Sample = Tuple[float, Dict[str, str]]


class InMemoryMetricsCollector:
    """Simple in-memory metrics collector, safe to share across calls."""

    def __init__(self) -> None:
        self._samples: Dict[str, List[_Sample]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, value, tags)

    def get_metrics(self) -> Dict[str, Any]:
        """Summary per metric: count, total, min, max and last value."""
        with self._lock:
            summary: Dict[str, Any] = {}
            for name, samples in self._samples.items():
                values = [value for value, _ in samples]
                summary[name] = {
                    "count": len(values),
                    "total": sum(values),
                    "min": min(values),
                    "max": max(values),
                    "last": values[-1],
                }
            return summary

    def samples(self, name: str) -> List[_Sample]:
        """Raw samples recorded under ``name``."""
        with self._lock:
            return list(self._samples.get(name, []))

    def clear(self) -> None:
        with self._lock:
            self._samples.clear()

    def _record(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]],
    ) -> None:
        with self._lock:
            self._samples.setdefault(name, []).append((value, dict(tags or {})))
