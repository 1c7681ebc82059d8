"""Counting check results by status."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .checkmodels import ResultStatus

_FIELDS = {
    ResultStatus.PASSED: "passed",
    ResultStatus.FAILED: "failed",
    ResultStatus.UNKNOWN: "unknown",
}


@dataclass
class Statistics:
    """Number of passed, failed and unknown results, and their total."""

    passed: int = 0
    failed: int = 0
    unknown: int = 0
    total: int = 0

    def _field_for(self, value: Any) -> str:
        try:
            name = _FIELDS.get(value)
        except TypeError:
            name = None
        if name is None:
            raise ValueError(f"unknown statistical value: {value}")
        return name

    def add(self, value: ResultStatus | str) -> None:
        """Count one result of status ``value``; raise ``ValueError`` for other values."""
        name = self._field_for(value)
        setattr(self, name, getattr(self, name) + 1)
        self.total += 1

    def sub(self, value: ResultStatus | str) -> None:
        """Remove one result of status ``value``; raise ``ValueError`` for other values."""
        name = self._field_for(value)
        setattr(self, name, getattr(self, name) - 1)
        self.total -= 1

    def to_dict(self) -> dict[str, int]:
        """The counters that are not zero, keyed by name."""
        counters = {
            "passed": self.passed,
            "failed": self.failed,
            "unknown": self.unknown,
            "total": self.total,
        }
        return {key: value for key, value in counters.items() if value}