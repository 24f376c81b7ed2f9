"""Workflow component - content lifecycle state machine."""

from src.components.workflow.component import PROTECTED_FIELDS, ContentStatusMachine
from src.components.workflow.ports import ClockPort, ContentStorePort
from src.domain.errors import (
    InvalidTransition,
    NotPublishable,
    PermissionDenied,
    RecordNotFound,
    StorageError,
    WorkflowError,
)

__all__ = [
    # Component
    "ContentStatusMachine",
    "PROTECTED_FIELDS",
    # Errors
    "WorkflowError",
    "PermissionDenied",
    "NotPublishable",
    "InvalidTransition",
    "StorageError",
    "RecordNotFound",
    # Ports
    "ContentStorePort",
    "ClockPort",
]
