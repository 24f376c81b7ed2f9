"""
Publishing component models - frozen dataclass outputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    """Display emphasis for a validation result."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a publishing readiness check.

    is_publishable is true if and only if errors is empty.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    seo_complete: bool = False
    geo_complete: bool = False
    faq_complete: bool = False

    @property
    def is_publishable(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class PublishingStats:
    """Aggregate readiness counters over a collection of records."""

    total: int = 0
    publishable: int = 0
    missing_seo: int = 0
    missing_geo: int = 0
    missing_faq: int = 0

    @property
    def publishable_percent(self) -> int:
        if self.total == 0:
            return 0
        return round(self.publishable * 100 / self.total)
