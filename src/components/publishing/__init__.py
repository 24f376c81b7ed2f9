"""Publishing component - publishing readiness validation and statistics."""

from src.components.publishing.component import (
    PublishingValidator,
    generate_slug,
    is_valid_slug,
    severity,
    stats,
    validate,
)
from src.components.publishing.models import PublishingStats, Severity, ValidationResult

__all__ = [
    # Entry points
    "validate",
    "severity",
    "stats",
    "generate_slug",
    "is_valid_slug",
    # Component
    "PublishingValidator",
    # Models
    "PublishingStats",
    "Severity",
    "ValidationResult",
]
