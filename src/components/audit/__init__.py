"""
Audit component - append-only review history for workflow transitions.
"""

from .component import (
    AuditTrailRecorder,
    InMemoryAuditTrailRepo,
)
from .ports import AuditTrailPort, AuditTrailRepoPort, TimePort

__all__ = [
    # Component
    "AuditTrailRecorder",
    "InMemoryAuditTrailRepo",
    # Ports
    "AuditTrailPort",
    "AuditTrailRepoPort",
    "TimePort",
]
