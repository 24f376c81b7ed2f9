"""Batch component - multi-record selection and batched workflow actions."""

from src.components.batch.component import BATCH_ACTIONS, BatchOperationCoordinator
from src.components.batch.models import (
    BatchAction,
    BatchFailure,
    BatchOperationResult,
    ProgressCallback,
    SelectionRow,
)
from src.components.batch.selection import SelectionSet

__all__ = [
    # Components
    "BatchOperationCoordinator",
    "SelectionSet",
    "BATCH_ACTIONS",
    # Models
    "BatchAction",
    "BatchFailure",
    "BatchOperationResult",
    "ProgressCallback",
    "SelectionRow",
]
